"""Domain layer - cache data structures and value objects."""

from .entities.entry import Entry
from .entities.cache import RecencyCache
from .services.recency_list import RecencyList
from .value_objects.config import CacheConfig, CapacityPolicy
from .value_objects.lookup import LookupResult

__all__ = [
    # Entities
    'Entry',
    'RecencyCache',
    # Services
    'RecencyList',
    # Value Objects
    'CacheConfig',
    'CapacityPolicy',
    'LookupResult',
]
