from .api import ContentSource, make_source

__all__ = ["ContentSource", "make_source"]
