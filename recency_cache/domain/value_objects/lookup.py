"""Lookup result value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LookupResult:
    """Outcome of a cache lookup.
    
    Keeps presence separate from the value, so a stored "0" is never
    mistaken for a miss.
    """
    found: bool
    value: str | None = None
    
    @classmethod
    def hit(cls, value: str) -> LookupResult:
        return cls(found=True, value=value)
    
    @classmethod
    def missing(cls) -> LookupResult:
        return cls(found=False)
    
    def __bool__(self) -> bool:
        return self.found
    
    def value_or(self, default: str) -> str:
        """Return the cached value, or default on a miss."""
        if self.found:
            return self.value
        return default
