from tunesearch.models.core import SearchResult

__all__ = ["SearchResult"]
