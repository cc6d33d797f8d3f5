"""Summary: Catalog reconciliation use cases.
Why: Expose the engine pieces behind one import path.
"""

from .aggregates import AggregateRecalculator
from .entity_cache import EntityCache
from .path_codec import PathCodec, to_readable, to_storable
from .reconciler import ReconcileAction, Reconciler
from .scanner import Scanner
from .sync_runner import CatalogSynchronizer

__all__ = [
    "AggregateRecalculator",
    "CatalogSynchronizer",
    "EntityCache",
    "PathCodec",
    "ReconcileAction",
    "Reconciler",
    "Scanner",
    "to_readable",
    "to_storable",
]
