from .track_tags import TrackTags

__all__ = ["TrackTags"]
