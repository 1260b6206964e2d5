from .hashing import bucket_index, polynomial_hash
from .linked_list import Chain, Entry
from .hash_table import HashTable

__all__ = [
    "bucket_index",
    "polynomial_hash",
    "Chain",
    "Entry",
    "HashTable",
]
