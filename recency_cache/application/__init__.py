"""Application layer - contracts for code that embeds the cache."""

from .ports.cache import KeyValueCache

__all__ = ['KeyValueCache']
