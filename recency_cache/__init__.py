"""Recency Cache - bounded in-memory int to str cache with write-recency eviction."""

__version__ = "1.0.0"

from .config import CapacityPolicy, MISS_SENTINEL
from .domain import CacheConfig, LookupResult, RecencyCache
from .application import KeyValueCache
from .exceptions import (
    RecencyCacheError,
    ConfigurationError,
    InvalidCapacityError,
    ValidationError,
)
from .utils.env import setup_logging

__all__ = [
    '__version__',
    'CapacityPolicy',
    'MISS_SENTINEL',
    'CacheConfig',
    'LookupResult',
    'RecencyCache',
    'KeyValueCache',
    'setup_logging',
    # Exceptions
    'RecencyCacheError',
    'ConfigurationError',
    'InvalidCapacityError',
    'ValidationError',
]
