"""Value objects - immutable data with validation."""

from .config import CacheConfig, CapacityPolicy
from .lookup import LookupResult

__all__ = [
    'CacheConfig',
    'CapacityPolicy',
    'LookupResult',
]
