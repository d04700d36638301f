"""Intrusive doubly linked list ordered by write recency."""

from __future__ import annotations

from typing import Iterator

from ..entities.entry import Entry


class RecencyList:
    """Doubly linked list of entries, most recent at the front.
    
    Head and tail sentinels keep every splice branch-free. Entries are
    handed in by the caller and used as their own handles, so any linked
    entry can be unlinked in O(1) regardless of what happened elsewhere
    in the list.
    """
    
    def __init__(self) -> None:
        self._head = Entry(0, "")
        self._tail = Entry(0, "")
        self._head.next = self._tail
        self._tail.prev = self._head
        self._size = 0
    
    def __len__(self) -> int:
        return self._size
    
    def __bool__(self) -> bool:
        return self._size > 0
    
    def __iter__(self) -> Iterator[Entry]:
        """Iterate from most to least recent."""
        node = self._head.next
        while node is not self._tail:
            yield node
            node = node.next
    
    @property
    def front(self) -> Entry | None:
        """Most recently pushed entry, or None when empty."""
        return self._head.next if self._size else None
    
    @property
    def back(self) -> Entry | None:
        """Least recently pushed entry, or None when empty."""
        return self._tail.prev if self._size else None
    
    def push_front(self, entry: Entry) -> None:
        """Link entry at the head."""
        if entry.linked:
            raise ValueError(f"Entry for key {entry.key} is already linked")
        first = self._head.next
        entry.prev = self._head
        entry.next = first
        first.prev = entry
        self._head.next = entry
        self._size += 1
    
    def unlink(self, entry: Entry) -> None:
        """Detach entry from wherever it sits in the list."""
        if not entry.linked:
            raise ValueError(f"Entry for key {entry.key} is not linked")
        entry.prev.next = entry.next
        entry.next.prev = entry.prev
        entry.prev = None
        entry.next = None
        self._size -= 1
    
    def pop_back(self) -> Entry:
        """Unlink and return the least recent entry.
        
        Raises:
            IndexError: If the list is empty
        """
        if not self._size:
            raise IndexError("pop from empty RecencyList")
        entry = self._tail.prev
        self.unlink(entry)
        return entry
