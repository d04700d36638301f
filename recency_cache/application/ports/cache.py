"""Cache port - interface for integer-keyed string caches."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ...domain.value_objects.lookup import LookupResult


@runtime_checkable
class KeyValueCache(Protocol):
    """Port for bounded int -> str caches."""
    
    def capacity_limit(self) -> int:
        """Configured upper bound on entries."""
        ...
    
    def count(self) -> int:
        """Current number of entries."""
        ...
    
    def write(self, key: int, value: str) -> None:
        """Insert or overwrite a value, evicting if full."""
        ...
    
    def read(self, key: int) -> str:
        """Get value, or the miss sentinel if absent."""
        ...
    
    def lookup(self, key: int) -> LookupResult:
        """Get value with explicit presence."""
        ...
