"""String hashing for bucket placement.

Keys are folded into a 32-bit unsigned accumulator with a base-31 rolling
hash, then spread over the bucket range with Knuth's multiplicative method:

    index = floor(capacity * frac(acc * (sqrt(5) - 1) / 2))

The index depends on the capacity, so a table must rehash every entry
whenever its capacity changes.
"""

from __future__ import annotations

import math

GOLDEN_RATIO_FRACTION = (math.sqrt(5) - 1) / 2

_MASK_32 = 0xFFFFFFFF


def polynomial_hash(key: str) -> int:
    """Return the 32-bit base-31 rolling hash of the UTF-8 bytes of *key*."""
    if not isinstance(key, str):
        raise TypeError(f"key must be str, not {type(key).__name__}")
    acc = 0
    for byte in key.encode("utf-8"):
        acc = (acc * 31 + byte) & _MASK_32
    return acc


def bucket_index(key: str, capacity: int) -> int:
    """Map *key* to a bucket index in ``[0, capacity)``."""
    if capacity < 1:
        raise ValueError("capacity must be >= 1")
    frac, _ = math.modf(polynomial_hash(key) * GOLDEN_RATIO_FRACTION)
    # Float rounding can push the product onto capacity itself.
    return min(int(capacity * frac), capacity - 1)
