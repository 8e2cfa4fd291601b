"""iFavorites: paged favorites for project assets."""

__version__ = "0.1.0"
