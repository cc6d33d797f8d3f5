"""Catalog reconciliation feature."""
