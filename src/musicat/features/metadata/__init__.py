"""Tag-reading feature: the default ``TagReaderPort`` implementation."""
