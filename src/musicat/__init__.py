"""musicat: reconcile a media archive against a relational catalog."""

__version__ = "0.1.0"
