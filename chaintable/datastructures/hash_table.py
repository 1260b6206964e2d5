from __future__ import annotations

import logging
import sys
from typing import Iterator, List, Optional, TextIO, Tuple

from ..config import DEFAULT_FLOOR_CAPACITY, DEFAULT_POLICY, ResizePolicy
from ..errors import TableAllocationError, TableClosedError
from .hashing import bucket_index
from .linked_list import Chain, Entry

logger = logging.getLogger(__name__)


def _allocate_buckets(capacity: int) -> List[Optional[Chain]]:
    try:
        return [None] * capacity
    except MemoryError as exc:
        raise TableAllocationError(f"cannot allocate {capacity} buckets") from exc


class HashTable:
    """A separate-chaining hash table from ``str`` keys to ``int`` values.

    Behaviour:
    - Buckets are created lazily; an empty slot holds None.
    - Every ``put`` and ``remove`` re-evaluates the resize policy, including
      updates of an existing key and removals of a missing one.
    - Growth doubles the capacity at load >= 0.75; shrink halves it at
      load <= 0.25, never below ``floor_capacity``.
    - Any capacity change rebuilds every entry at its new bucket index.
    - After ``destroy()`` every other method raises :class:`TableClosedError`.
    """

    __slots__ = ("_floor", "_cap", "_buckets", "_size", "_policy", "_closed")

    def __init__(self, floor_capacity: int = DEFAULT_FLOOR_CAPACITY, policy: Optional[ResizePolicy] = None) -> None:
        if isinstance(floor_capacity, bool) or not isinstance(floor_capacity, int):
            raise TypeError("floor_capacity must be an int")
        if floor_capacity < 1:
            raise ValueError("floor_capacity must be >= 1")
        policy = policy or DEFAULT_POLICY
        if policy.max_capacity is not None and floor_capacity > policy.max_capacity:
            raise ValueError("floor_capacity cannot exceed policy.max_capacity")

        self._floor: int = floor_capacity
        self._cap: int = floor_capacity
        self._policy: ResizePolicy = policy
        self._buckets: List[Optional[Chain]] = _allocate_buckets(floor_capacity)
        self._size: int = 0
        self._closed: bool = False
        logger.debug("created table with floor capacity %d", floor_capacity)

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _check_open(self) -> None:
        if self._closed:
            raise TableClosedError("table has been destroyed")

    @staticmethod
    def _check_key(key: str) -> None:
        if not isinstance(key, str):
            raise TypeError(f"key must be str, not {type(key).__name__}")

    def _chain_for(self, key: str) -> Optional[Chain]:
        self._check_open()
        self._check_key(key)
        return self._buckets[bucket_index(key, self._cap)]

    def _rehash(self) -> None:
        """Apply the resize policy once; rebuild all entries on a capacity change."""
        new_cap = self._policy.target_capacity(self._size, self._cap, self._floor)
        if new_cap == self._cap:
            return

        new_buckets = _allocate_buckets(new_cap)
        try:
            for bucket in self._buckets:
                if bucket is None:
                    continue
                for n in bucket.entries():
                    idx = bucket_index(n.key, new_cap)
                    if new_buckets[idx] is None:
                        new_buckets[idx] = Chain()
                    new_buckets[idx].prepend(Entry(n.key, n.value))
        except MemoryError as exc:
            raise TableAllocationError(f"cannot rebuild table at capacity {new_cap}") from exc

        logger.debug("resizing %d -> %d buckets (%d entries)", self._cap, new_cap, self._size)
        old_buckets = self._buckets
        self._buckets = new_buckets
        self._cap = new_cap
        for bucket in old_buckets:
            if bucket is not None:
                bucket.clear()

    # -----------------------------
    # Core operations
    # -----------------------------
    def contains(self, key: str) -> bool:
        """Return True if *key* is stored in the table."""
        bucket = self._chain_for(key)
        return bucket is not None and bucket.find_entry(key) is not None

    def get(self, key: str, default: Optional[int] = None) -> Optional[int]:
        """Return the value stored for *key*, or *default* when it is absent."""
        bucket = self._chain_for(key)
        if bucket is None:
            return default
        n = bucket.find_entry(key)
        return default if n is None else n.value

    def put(self, key: str, value: int) -> None:
        """Insert *key* or overwrite its value, then apply the resize policy."""
        self._check_open()
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"value must be int, not {type(value).__name__}")
        self._check_key(key)
        idx = bucket_index(key, self._cap)
        bucket = self._buckets[idx]
        if bucket is None:
            bucket = self._buckets[idx] = Chain()
        existing = bucket.find_entry(key)
        old_value = existing.value if existing is not None else None
        try:
            inserted = bucket.insert_or_replace(key, value)
        except MemoryError as exc:
            raise TableAllocationError(f"cannot allocate entry for {key!r}") from exc
        if inserted:
            self._size += 1
        try:
            self._rehash()
        except TableAllocationError:
            # Undo the write so a failed put leaves the table as it was.
            if inserted:
                bucket.delete(key)
                self._size -= 1
                if not bucket:
                    self._buckets[idx] = None
            else:
                existing.value = old_value
            raise

    def remove(self, key: str) -> bool:
        """Delete *key* if present, then apply the resize policy.

        The policy runs even when nothing was removed, so a miss can still
        shrink an under-filled table.
        """
        bucket = self._chain_for(key)
        removed = bucket is not None and bucket.delete(key)
        if removed:
            self._size -= 1
        self._rehash()
        return removed

    def clear(self) -> None:
        """Drop every entry. Capacity and floor capacity are unchanged."""
        self._check_open()
        for i, bucket in enumerate(self._buckets):
            if bucket is not None:
                bucket.clear()
                self._buckets[i] = None
        self._size = 0
        logger.debug("cleared table (capacity %d)", self._cap)

    def destroy(self) -> None:
        """Drop every entry and the bucket array. Calling it twice is a no-op."""
        if self._closed:
            return
        self.clear()
        self._buckets = []
        self._cap = 0
        self._floor = 0
        self._closed = True
        logger.debug("destroyed table")

    def copy(self) -> "HashTable":
        """Return an independent deep copy with the same bucket layout."""
        self._check_open()
        clone = HashTable.__new__(HashTable)
        clone._floor = self._floor
        clone._cap = self._cap
        clone._policy = self._policy
        clone._closed = False
        clone._buckets = _allocate_buckets(self._cap)
        for i, bucket in enumerate(self._buckets):
            if bucket is None:
                continue
            chain = Chain()
            # Prepend in reverse so the copy keeps the original chain order.
            for n in reversed(list(bucket.entries())):
                chain.prepend(Entry(n.key, n.value))
            clone._buckets[i] = chain
        clone._size = self._size
        return clone

    # -----------------------------
    # Properties
    # -----------------------------
    @property
    def capacity(self) -> int:
        return self._cap

    @property
    def floor_capacity(self) -> int:
        return self._floor

    @property
    def policy(self) -> ResizePolicy:
        return self._policy

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def load_factor(self) -> float:
        """Entries per bucket (``len(self) / capacity``)."""
        self._check_open()
        return self._size / self._cap

    # -----------------------------
    # Enumeration
    # -----------------------------
    def _iter_items(self) -> Iterator[Tuple[str, int]]:
        self._check_open()
        for bucket in self._buckets:
            if bucket:
                yield from bucket.items()

    def items(self) -> List[Tuple[str, int]]:
        """Snapshot of (key, value) pairs, bucket order then chain order."""
        return list(self._iter_items())

    def keys(self) -> List[str]:
        return [k for k, _ in self._iter_items()]

    def values(self) -> List[int]:
        return [v for _, v in self._iter_items()]

    def chain_lengths(self) -> List[int]:
        """Number of entries held by each bucket."""
        self._check_open()
        return [len(bucket) if bucket else 0 for bucket in self._buckets]

    # -----------------------------
    # Diagnostics
    # -----------------------------
    def format_traverse(self) -> str:
        """All entries on one line, followed by the load factor."""
        pairs = "".join(f"{k}:{v} " for k, v in self._iter_items())
        return f"{{ {pairs}}} : {self.load_factor:.2f}"

    def format_describe(self) -> str:
        """One line per bucket, including empty ones."""
        self._check_open()
        lines = []
        for i, bucket in enumerate(self._buckets):
            chain = " -> ".join(f"{{{k},{v}}}" for k, v in bucket.items()) if bucket else ""
            lines.append(f"{i:2d} | {chain}")
        return "\n".join(lines)

    def dump(self, stream: Optional[TextIO] = None) -> None:
        print(self.format_traverse(), file=stream or sys.stdout)

    def describe(self, stream: Optional[TextIO] = None) -> None:
        print(self.format_describe(), file=stream or sys.stdout)

    # -----------------------------
    # Standard magic methods
    # -----------------------------
    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        self._check_open()
        return isinstance(key, str) and self.contains(key)

    def __getitem__(self, key: str) -> int:
        value = self.get(key)
        if value is None:
            raise KeyError(key)
        return value

    def __setitem__(self, key: str, value: int) -> None:
        self.put(key, value)

    def __delitem__(self, key: str) -> None:
        if not self.remove(key):
            raise KeyError(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __repr__(self) -> str:
        if self._closed:
            return "HashTable(<destroyed>)"
        pairs = ", ".join(f"{k!r}: {v!r}" for k, v in self._iter_items())
        return f"HashTable({{{pairs}}}, capacity={self._cap})"
