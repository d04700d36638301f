"""Entry entity - one node of the recency sequence."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(eq=False, slots=True)
class Entry:
    """Cached value plus its position links.
    
    The key is stored on the node so eviction can drop the index slot
    straight from the tail without searching the index.
    """
    key: int
    value: str
    prev: Entry | None = field(default=None, repr=False)
    next: Entry | None = field(default=None, repr=False)
    
    @property
    def linked(self) -> bool:
        return self.prev is not None or self.next is not None
