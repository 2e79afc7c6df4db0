import copy
import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Optional

from ...core.exceptions import TableExistsError, TableNotFoundError
from ..interfaces import StoreGateway, HASH_KEY, RANGE_KEY
from ..mutation import Mutation

logger = logging.getLogger(__name__)

TTL_FIELD = "ttl"


@dataclass
class MemoryStoreStats:
    reads: int = 0
    updates: int = 0
    deletes: int = 0
    expired: int = 0


class _Table:
    def __init__(self, name: str, range_key: bool):
        self.name = name
        self.range_key = range_key
        self.items: dict[tuple[Any, Optional[float]], dict] = {}

    def key(self, hash_value: Any, range_value: Optional[float]) -> tuple[Any, Optional[float]]:
        if self.range_key:
            if range_value is None:
                raise ValueError(f"Table '{self.name}' requires a range key")
            return hash_value, float(range_value)
        return hash_value, None


class MemoryStore(StoreGateway):
    """
    In-memory key-value store with atomic per-item updates.

    Every operation runs under a single re-entrant lock, which gives each
    update_item call the same guarantee a real store gives server-side:
    two writers adding to one set both land, and a removal is never
    undone by a concurrent writer.

    Items are returned as deep copies so callers can never mutate stored
    state behind the lock.
    """

    def __init__(self):
        self._tables: dict[str, _Table] = {}
        self._lock = threading.RLock()
        self.stats = MemoryStoreStats()

    def _get_table(self, table_name: str) -> _Table:
        table = self._tables.get(table_name)
        if table is None:
            raise TableNotFoundError(table_name)
        return table

    def read(self, table_name: str, hash_value: Any,
             range_value: Optional[float] = None) -> Optional[dict]:
        with self._lock:
            table = self._get_table(table_name)
            self.stats.reads += 1
            item = table.items.get(table.key(hash_value, range_value))
            return copy.deepcopy(item) if item is not None else None

    def update_item(self, table_name: str, hash_value: Any, mutation: Mutation,
                    range_value: Optional[float] = None) -> None:
        with self._lock:
            table = self._get_table(table_name)
            key = table.key(hash_value, range_value)
            item = table.items.get(key)

            if item is None:
                if mutation.only_removes() or mutation.is_empty():
                    return
                item = {HASH_KEY: hash_value}
                if table.range_key:
                    item[RANGE_KEY] = key[1]
                table.items[key] = item

            mutation.apply(item)
            self.stats.updates += 1

    def delete_item(self, table_name: str, hash_value: Any,
                    range_value: Optional[float] = None) -> None:
        with self._lock:
            table = self._get_table(table_name)
            if table.items.pop(table.key(hash_value, range_value), None) is not None:
                self.stats.deletes += 1

    def create_table(self, table_name: str, range_key: bool = False) -> None:
        with self._lock:
            if table_name in self._tables:
                raise TableExistsError(table_name)
            self._tables[table_name] = _Table(table_name, range_key)
        logger.info(f"Created table {table_name} (range key: {range_key})")

    def has_table(self, table_name: str) -> bool:
        with self._lock:
            return table_name in self._tables

    def list_tables(self) -> list[str]:
        with self._lock:
            return sorted(self._tables)

    def delete_table(self, table_name: str) -> None:
        with self._lock:
            self._get_table(table_name)
            del self._tables[table_name]
        logger.info(f"Deleted table {table_name}")

    def items(self, table_name: str) -> list[dict]:
        """Return copies of every item in a table."""
        with self._lock:
            return [copy.deepcopy(item)
                    for item in self._get_table(table_name).items.values()]

    def purge_expired(self, now: Optional[float] = None) -> int:
        """
        Drop items whose ttl lies in the past.

        Args:
            now: Reference time as a POSIX timestamp; defaults to time.time()

        Returns:
            Number of items removed across all tables
        """
        now = time.time() if now is None else now
        removed = 0
        with self._lock:
            for table in self._tables.values():
                expired = [key for key, item in table.items.items()
                           if item.get(TTL_FIELD) is not None and item[TTL_FIELD] < now]
                for key in expired:
                    del table.items[key]
                removed += len(expired)
            self.stats.expired += removed

        if removed:
            logger.debug(f"Purged {removed} expired items")
        return removed

    def __str__(self) -> str:
        return f"MemoryStore({len(self._tables)} tables)"

    def __repr__(self) -> str:
        return self.__str__()
