from __future__ import annotations
from typing import Iterator, Optional, Tuple


class Entry:
    """A single key/value node in a bucket chain.

    Each entry is linked from exactly one place: the head slot of its
    :class:`Chain` or the ``next`` field of the entry before it.
    """

    __slots__ = ("key", "value", "next")

    def __init__(self, key: str, value: int, next: Optional["Entry"] = None) -> None:
        self.key = key
        self.value = value
        self.next = next

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"Entry({self.key!r}, {self.value!r})"


class Chain:
    """Singly-linked list of entries that share a bucket.

    New entries are prepended, so a walk from the head visits the most
    recently inserted key first.
    """

    __slots__ = ("head",)

    def __init__(self) -> None:
        self.head: Optional[Entry] = None

    def find_entry(self, key: str) -> Optional[Entry]:
        """Return the entry holding *key*, or None."""
        n = self.head
        while n:
            if n.key == key:
                return n
            n = n.next
        return None

    def find(self, key: str) -> Optional[int]:
        """Return the value stored for *key*, or None if not present."""
        n = self.find_entry(key)
        return None if n is None else n.value

    def prepend(self, entry: Entry) -> None:
        """Make *entry* the new head. The caller guarantees its key is absent."""
        entry.next = self.head
        self.head = entry

    def insert_or_replace(self, key: str, value: int) -> bool:
        """Overwrite the value for *key*, or prepend a new entry.

        Returns True if a new entry was created; False if an existing one was
        updated in place.
        """
        n = self.find_entry(key)
        if n is not None:
            n.value = value
            return False
        self.head = Entry(key, value, self.head)
        return True

    def delete(self, key: str) -> bool:
        """Unlink the entry with *key*; return True if one was removed."""
        prev: Optional[Entry] = None
        cur = self.head
        while cur:
            if cur.key == key:
                if prev:
                    prev.next = cur.next
                else:
                    self.head = cur.next
                cur.next = None
                return True
            prev, cur = cur, cur.next
        return False

    def clear(self) -> int:
        """Unlink every entry and return how many were dropped."""
        dropped = 0
        n = self.head
        self.head = None
        while n:
            n.next, n = None, n.next
            dropped += 1
        return dropped

    def entries(self) -> Iterator[Entry]:
        n = self.head
        while n:
            yield n
            n = n.next

    def items(self) -> Iterator[Tuple[str, int]]:
        """Yield (key, value) pairs in chain order."""
        for n in self.entries():
            yield (n.key, n.value)

    def __len__(self) -> int:
        return sum(1 for _ in self.entries())

    def __bool__(self) -> bool:
        return self.head is not None
