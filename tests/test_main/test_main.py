"""
Tests for the main module.
"""
from rich.table import Table

from kvindex.index import IndexManager
from kvindex.main import main, render_entries, render_indexes
from kvindex.storage.documents import DocumentRepository


def test_render_indexes(user_schema, config, store):
    manager = IndexManager(user_schema, store, config)
    manager.index("name")
    manager.index("name", range_key="created_at")

    table = render_indexes(manager)

    assert isinstance(table, Table)
    assert table.row_count == 2
    assert list(table.columns[0].cells) == [d.table_name for d in manager.indexes]
    assert list(table.columns[2].cells) == ["-", "created_at"]


def test_render_entries(user_schema, config, store):
    manager = IndexManager(user_schema, store, config)
    manager.index("name")
    users = DocumentRepository(user_schema, store, manager)
    users.create_tables()
    users.create(id="b", name="Josh")
    josh = users.new(name="Josh")
    josh.id = "a"
    users.save(josh)

    table = render_entries(manager, store)

    assert table.row_count == 1
    assert list(table.columns[1].cells) == ["Josh"]
    assert list(table.columns[3].cells) == ["a, b"]


def test_main(capsys):
    main()
    output = capsys.readouterr().out
    assert "Indexes on User" in output
    assert "Index entries" in output
