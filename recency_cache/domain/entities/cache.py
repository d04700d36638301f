"""Recency cache - bounded int to str store with write-recency eviction."""

from __future__ import annotations

import logging

from ...config import MISS_SENTINEL, CapacityPolicy
from ...exceptions import InvalidCapacityError, ValidationError
from ..services.recency_list import RecencyList
from ..value_objects.config import CacheConfig
from ..value_objects.lookup import LookupResult
from .entry import Entry

logger = logging.getLogger(__name__)


def _check_key(key: object) -> None:
    # bool is an int subclass and would alias keys 0 and 1
    if not isinstance(key, int) or isinstance(key, bool):
        raise ValidationError(
            f"Cache keys must be int, got {type(key).__name__}", field="key"
        )


class RecencyCache:
    """Fixed-capacity cache that evicts the least recently written entry.

    Entries live in a RecencyList ordered by the time of their last write
    (insert or update) and are indexed by key for O(1) lookup. Reads never
    reorder entries, so a key that is read often but written once is still
    evicted in write order.

    Not thread-safe. Hosts sharing an instance across threads must
    serialize access themselves.

    Attributes:
        capacity: Configured upper bound on the number of entries
    """

    def __init__(self, capacity: int, policy: CapacityPolicy = CapacityPolicy.STRICT):
        """Create an empty cache.

        Args:
            capacity: Maximum number of entries, must be greater than 0
            policy: What to do with a non-positive capacity. STRICT raises,
                CLAMP stores a bound of 0 which disables eviction entirely.

        Raises:
            InvalidCapacityError: capacity <= 0 under the STRICT policy
            ValidationError: capacity is not an int
        """
        if not isinstance(capacity, int) or isinstance(capacity, bool):
            raise ValidationError(
                f"Cache capacity must be int, got {type(capacity).__name__}",
                field="capacity",
            )
        policy = CapacityPolicy(policy)

        if capacity <= 0:
            if policy is CapacityPolicy.STRICT:
                raise InvalidCapacityError(capacity)
            logger.warning(
                f"Cache capacity must be more than 0, got {capacity}. "
                "Clamping to 0, the cache will grow without bound."
            )
            capacity = 0

        self._capacity = capacity
        self._order = RecencyList()
        self._index: dict[int, Entry] = {}

    @classmethod
    def from_config(cls, config: CacheConfig) -> RecencyCache:
        """Create a cache from validated settings."""
        return cls(config.capacity, policy=config.policy)

    @property
    def capacity(self) -> int:
        return self._capacity

    def capacity_limit(self) -> int:
        """Return the configured bound, not the number of entries."""
        return self._capacity

    def count(self) -> int:
        """Return the number of live entries."""
        return len(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, count={len(self._index)})"

    def write(self, key: int, value: str) -> None:
        """Insert or overwrite key, making it the most recently written.

        Writing a new key into a full cache first evicts the least recently
        written entry.

        Raises:
            ValidationError: key is not an int or value is not a str
        """
        _check_key(key)
        if not isinstance(value, str):
            raise ValidationError(
                f"Cache values must be str, got {type(value).__name__}", field="value"
            )

        current = self._index.get(key)
        if current is not None:
            self._order.unlink(current)
            logger.debug(f"Replacing key {key}")
        elif self._capacity > 0 and len(self._order) == self._capacity:
            evicted = self._order.pop_back()
            del self._index[evicted.key]
            logger.debug(f"Evicted key {evicted.key} to admit key {key}")

        entry = Entry(key, value)
        self._order.push_front(entry)
        self._index[key] = entry

    def lookup(self, key: int) -> LookupResult:
        """Look up key without changing eviction order."""
        _check_key(key)
        entry = self._index.get(key)
        if entry is None:
            return LookupResult.missing()
        return LookupResult.hit(entry.value)

    def read(self, key: int) -> str:
        """Return the value for key, or MISS_SENTINEL ("0") if absent.

        A stored "0" reads the same as a miss; use lookup() when that
        matters. Does not change eviction order.
        """
        return self.lookup(key).value_or(MISS_SENTINEL)

    def keys(self) -> list[int]:
        """Keys from most to least recently written."""
        return [entry.key for entry in self._order]

    def items(self) -> list[tuple[int, str]]:
        """(key, value) pairs from most to least recently written."""
        return [(entry.key, entry.value) for entry in self._order]
