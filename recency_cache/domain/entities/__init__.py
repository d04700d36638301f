"""Domain entities - objects with identity."""

from .entry import Entry
from .cache import RecencyCache

__all__ = ['Entry', 'RecencyCache']
