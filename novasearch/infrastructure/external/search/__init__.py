from .serper_search import SerperSearchProvider

__all__ = ["SerperSearchProvider"]
