"""Infrastructure adapters: database access and logging."""
