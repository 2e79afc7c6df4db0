from .memory_store import MemoryStore, MemoryStoreStats

__all__ = ["MemoryStore", "MemoryStoreStats"]
