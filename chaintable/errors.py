"""Exception types raised by the chaintable package.

Argument validation uses the builtin ``ValueError`` / ``TypeError``; the
classes here cover the two conditions specific to a table's lifecycle.
"""


class ChainTableError(Exception):
    """Base class for all chaintable errors."""


class TableAllocationError(ChainTableError, MemoryError):
    """Raised when a bucket array or an entry cannot be allocated."""


class TableClosedError(ChainTableError, RuntimeError):
    """Raised when a destroyed table is used again."""
