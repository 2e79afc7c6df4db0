from abc import ABC, abstractmethod
from typing import Any, Optional

from ..mutation import Mutation

HASH_KEY = "id"
RANGE_KEY = "range"


class StoreGateway(ABC):
    """
    Abstract interface for the backing key-value store. 💾

    Items live in named tables and are addressed by a hash key, plus a
    range key for tables created with one. The store only supports
    primary-key access; everything index-shaped is built on top of it.

    Key Concepts:
    - read returns a copy of an item, or None when it does not exist 📖
    - update_item applies a Mutation atomically, server-side ⚛️
    - Concurrent update_item calls on one item must not lose changes 🔒
    """

    @abstractmethod
    def read(self, table_name: str, hash_value: Any,
             range_value: Optional[float] = None) -> Optional[dict]:
        """
        Read a single item. 📖

        Args:
            table_name: Table to read from
            hash_value: Hash key of the item
            range_value: Range key of the item, for ranged tables

        Returns:
            A copy of the item, or None if there is no such item

        Raises:
            TableNotFoundError: If the table does not exist
        """
        pass

    @abstractmethod
    def update_item(self, table_name: str, hash_value: Any, mutation: Mutation,
                    range_value: Optional[float] = None) -> None:
        """
        Atomically apply a mutation to a single item. ✍️

        The item is created when the mutation adds or sets something and the
        item does not exist yet.

        Raises:
            TableNotFoundError: If the table does not exist
        """
        pass

    @abstractmethod
    def delete_item(self, table_name: str, hash_value: Any,
                    range_value: Optional[float] = None) -> None:
        """Remove a single item. Deleting a missing item is not an error. 🗑️"""
        pass

    @abstractmethod
    def create_table(self, table_name: str, range_key: bool = False) -> None:
        """Create a table, optionally keyed by hash and range. 🏗️"""
        pass

    @abstractmethod
    def has_table(self, table_name: str) -> bool:
        pass

    @abstractmethod
    def list_tables(self) -> list[str]:
        pass

    @abstractmethod
    def delete_table(self, table_name: str) -> None:
        pass
