"""
Configuration defaults for chaintable.

Module-level constants hold the resize thresholds and the default floor
capacity. ``ResizePolicy`` bundles the thresholds so a table can be created
with a custom policy, e.g. one with a hard capacity cap:

    from chaintable import HashTable, ResizePolicy
    table = HashTable(16, policy=ResizePolicy(max_capacity=1024))
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

# Minimum number of buckets when the caller does not choose one.
DEFAULT_FLOOR_CAPACITY = 10

# Load factor at or above which the table doubles.
GROW_THRESHOLD = 0.75

# Load factor at or below which the table halves (never below its floor).
SHRINK_THRESHOLD = 0.25

GROWTH_FACTOR = 2

# Default log level for the command-line driver.
LOG_LEVEL = os.environ.get("CHAINTABLE_LOG_LEVEL", "WARNING").upper()


@dataclass(frozen=True)
class ResizePolicy:
    """Load-factor thresholds that drive growth and shrink.

    ``max_capacity`` of ``None`` leaves growth unbounded.
    """

    grow_threshold: float = GROW_THRESHOLD
    shrink_threshold: float = SHRINK_THRESHOLD
    max_capacity: Optional[int] = None

    def __post_init__(self) -> None:
        if not (0.0 < self.shrink_threshold < self.grow_threshold):
            raise ValueError("thresholds must satisfy 0 < shrink_threshold < grow_threshold")
        # A halved table must land strictly below the grow threshold.
        if self.shrink_threshold * GROWTH_FACTOR >= self.grow_threshold:
            raise ValueError("shrink_threshold * 2 must be below grow_threshold")
        if self.max_capacity is not None and self.max_capacity < 1:
            raise ValueError("max_capacity must be a positive integer")

    def target_capacity(self, count: int, capacity: int, floor_capacity: int) -> int:
        """Return the capacity the table should have; equal to *capacity* for no change."""
        load = count / capacity
        if load >= self.grow_threshold:
            grown = capacity * GROWTH_FACTOR
            if self.max_capacity is not None:
                grown = min(grown, max(self.max_capacity, capacity))
            return grown
        if load <= self.shrink_threshold and capacity > floor_capacity:
            return max(floor_capacity, capacity // GROWTH_FACTOR)
        return capacity


DEFAULT_POLICY = ResizePolicy()
