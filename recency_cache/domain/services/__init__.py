"""Domain services - pure data structures used by the cache."""

from .recency_list import RecencyList

__all__ = ['RecencyList']
