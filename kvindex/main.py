"""
Main application module.

Running it declares a few indexes on a sample schema, saves some
records and prints the resulting index tables.
"""

from datetime import datetime, timezone

from rich import box
from rich.console import Console
from rich.table import Table

from .core.record import RecordSchema
from .core.types import FieldType
from .index import IndexManager
from .storage import MemoryStore
from .storage.documents import DocumentRepository


def render_indexes(manager: IndexManager) -> Table:
    """Build a table listing every index declared on a manager."""
    table = Table(title=f"Indexes on {manager.schema.name}", box=box.ROUNDED)
    table.add_column("Table", style="cyan")
    table.add_column("Hash keys", style="green")
    table.add_column("Range key", style="magenta")

    for info in manager.describe():
        table.add_row(info.table_name, ", ".join(info.hash_keys), info.range_key or "-")
    return table


def render_entries(manager: IndexManager, store: MemoryStore) -> Table:
    """Build a table of every entry in every index of a manager."""
    table = Table(title="Index entries", box=box.SIMPLE)
    table.add_column("Table", style="cyan")
    table.add_column("Hash value", style="green")
    table.add_column("Range value", style="magenta")
    table.add_column("Ids")

    for descriptor in manager.indexes:
        for item in store.items(descriptor.table_name):
            range_value = item.get("range")
            table.add_row(descriptor.table_name, str(item["id"]),
                          "-" if range_value is None else f"{range_value:.0f}",
                          ", ".join(sorted(map(str, item.get("ids", ())))))
    return table


def main():
    """Main entry point of the application."""
    console = Console()
    schema = RecordSchema("User", {
        "name": FieldType.STRING,
        "password": FieldType.STRING,
        "created_at": FieldType.DATETIME,
    })
    store = MemoryStore()
    manager = IndexManager(schema, store)
    manager.index("name")
    manager.index(["password", "name"], range_key="created_at")

    users = DocumentRepository(schema, store, manager)
    users.create_tables()

    now = datetime.now(timezone.utc)
    josh = users.create(name="Josh", password="test123", created_at=now)
    users.create(name="Josh", password="hunter2", created_at=now)
    josh.update_attributes(users, name="Justin")

    console.print(render_indexes(manager))
    console.print(render_entries(manager, store))


if __name__ == "__main__":
    main()
