"""Ports - interfaces the cache exposes to embedding services."""

from .cache import KeyValueCache

__all__ = ['KeyValueCache']
