"""Navigate, query and modify JSON documents of unknown shape."""

__version__ = "0.5.1"
__all__ = ["document"]