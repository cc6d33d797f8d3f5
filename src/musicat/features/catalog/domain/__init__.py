"""Summary: Domain types for catalog reconciliation.
Why: Offer one import path for models and errors.
"""

from .errors import (
    AmbiguousEntityError,
    CatalogError,
    CatalogIntegrityError,
    InvalidPathError,
    MissingSentinelError,
)
from .models import DimensionKind, DimensionRow, SyncStats, TrackRecord

__all__ = [
    "AmbiguousEntityError",
    "CatalogError",
    "CatalogIntegrityError",
    "DimensionKind",
    "DimensionRow",
    "InvalidPathError",
    "MissingSentinelError",
    "SyncStats",
    "TrackRecord",
]
