"""Data access objects for catalog tables."""

from .dimension_dao import DimensionDAO
from .track_dao import TrackDAO

__all__ = ["DimensionDAO", "TrackDAO"]
