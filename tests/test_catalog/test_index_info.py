"""
Tests for index_info.py module.
"""
from kvindex.catalog import IndexDescriptor, IndexInfo


class TestIndexInfo:
    """Test cases for IndexInfo class."""

    def test_from_descriptor(self, user_schema, config):
        descriptor = IndexDescriptor(user_schema, "name", range_key="created_at",
                                     config=config)

        info = IndexInfo.from_descriptor(descriptor)

        assert info.table_name == descriptor.table_name
        assert info.source == "User"
        assert info.hash_keys == ["name"]
        assert info.range_key == "created_at"
        assert info.created_at > 0

    def test_keeps_explicit_timestamp(self):
        info = IndexInfo(table_name="t", source="User", hash_keys=["name"],
                         created_at=1000.0)
        assert info.created_at == 1000.0

    def test_dict_round_trip(self):
        info = IndexInfo(table_name="t", source="User", hash_keys=["a", "b"],
                         range_key=None, created_at=1000.0)

        data = info.to_dict()

        assert data == {
            "table_name": "t",
            "source": "User",
            "hash_keys": ["a", "b"],
            "range_key": None,
            "created_at": 1000.0,
        }
        assert IndexInfo.from_dict(data) == info
