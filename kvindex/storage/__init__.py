from .interfaces import StoreGateway, HASH_KEY, RANGE_KEY
from .mutation import Mutation
from .memory import MemoryStore, MemoryStoreStats

__all__ = [
    "StoreGateway",
    "HASH_KEY",
    "RANGE_KEY",
    "Mutation",
    "MemoryStore",
    "MemoryStoreStats",
]
