"""Configuration and constants for the recency cache."""

from enum import Enum


class CapacityPolicy(str, Enum):
    """How a cache reacts to a non-positive capacity."""
    STRICT = "strict"  # Raise InvalidCapacityError
    CLAMP = "clamp"  # Clamp the bound to 0 and run unbounded


DEFAULT_CAPACITY = 128

# Returned by RecencyCache.read() for keys that are not cached
MISS_SENTINEL = "0"

# Reference demonstration (recency-cache with no operations)
DEMO_CAPACITY = 2
DEMO_WRITES: tuple[tuple[int, str], ...] = (
    (1, "beta"),
    (3, "alpha"),
    (8, "gamma"),  # evicts key 1
)
DEMO_READS: tuple[int, ...] = (1, 3, 6, 8)


# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
