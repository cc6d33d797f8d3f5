"""sqlite-backed catalog storage."""
