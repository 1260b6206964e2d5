"""chaintable: a load-factor driven, separate-chaining hash table for str -> int."""

from .config import DEFAULT_FLOOR_CAPACITY, DEFAULT_POLICY, ResizePolicy
from .datastructures import HashTable, bucket_index, polynomial_hash
from .errors import ChainTableError, TableAllocationError, TableClosedError

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_FLOOR_CAPACITY",
    "DEFAULT_POLICY",
    "ResizePolicy",
    "HashTable",
    "bucket_index",
    "polynomial_hash",
    "ChainTableError",
    "TableAllocationError",
    "TableClosedError",
]
