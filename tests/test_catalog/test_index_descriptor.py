"""
Tests for index_descriptor.py module.
"""
import random

import pytest

from kvindex.catalog import IndexDescriptor, canonicalize, pluralize
from kvindex.config import IndexConfig
from kvindex.core.exceptions import InvalidField, KvIndexException
from kvindex.core.record import RecordSchema
from kvindex.core.types import FieldType


class TestCanonicalize:
    """Test cases for the canonicalize function."""

    def test_reorders_keys_alphabetically(self):
        assert canonicalize(["password", "name", "created_at"]) == (
            "created_at", "name", "password")

    def test_flattens_dedupes_and_drops_none(self):
        assert canonicalize(["b", ["a", ("b", None)], None, "a"]) == ("a", "b")

    def test_single_name(self):
        assert canonicalize("name") == ("name",)

    def test_none_is_empty(self):
        assert canonicalize(None) == ()

    def test_idempotent(self):
        once = canonicalize(["gamma", "alpha", "beta", "omega"])
        assert canonicalize(once) == once

    def test_order_independent(self):
        tokens = ["gamma", "alpha", "beta", "omega", "alpha"]
        expected = canonicalize(tokens)
        rng = random.Random(7)
        for _ in range(10):
            shuffled = tokens[:]
            rng.shuffle(shuffled)
            assert canonicalize(shuffled) == expected


class TestIndexDescriptor:
    """Test cases for IndexDescriptor class."""

    @pytest.fixture(autouse=True)
    def setup(self, user_schema, config):
        self.schema = user_schema
        self.config = config
        self.index = IndexDescriptor(user_schema, ["password", "name"],
                                     range_key="created_at", config=config)

    def test_assigns_hash_keys(self):
        assert self.index.hash_keys == ("name", "password")

    def test_assigns_range_keys(self):
        assert self.index.range_keys == ("created_at",)
        assert self.index.range_key == "created_at"
        assert self.index.has_range_key is True

    def test_name_is_sorted_union(self):
        assert self.index.name == ("created_at", "name", "password")

    def test_keys_are_hash_then_range(self):
        assert self.index.keys == ("name", "password", "created_at")

    def test_table_name(self):
        assert self.index.table_name == (
            "kvindex_tests_index_user_created_ats_and_names_and_passwords")

    def test_table_name_with_prefix(self):
        prefixed = IndexDescriptor(self.schema, ["password", "name"],
                                   range_key="created_at", prefix="prefixed",
                                   config=self.config)
        assert prefixed.table_name == (
            "kvindex_tests_index_prefixed_created_ats_and_names_and_passwords")

    def test_default_namespace(self):
        index = IndexDescriptor(self.schema, "name")
        assert index.config == IndexConfig()
        assert index.table_name == "kvindex_index_user_names"

    def test_key_order_does_not_matter(self):
        other = IndexDescriptor(self.schema, ["name", "password"],
                                range_key="created_at", config=self.config)
        assert other == self.index
        assert hash(other) == hash(self.index)
        assert other.table_name == self.index.table_name

    def test_hash_only_index(self):
        index = IndexDescriptor(self.schema, "name", config=self.config)
        assert index.range_keys == ()
        assert index.range_key is None
        assert index.has_range_key is False
        assert index.table_name == "kvindex_tests_index_user_names"

    def test_self_range_index(self):
        index = IndexDescriptor(self.schema, "last_logged_in_at", range=True,
                                config=self.config)
        assert index.hash_keys == ("last_logged_in_at",)
        assert index.range_keys == ("last_logged_in_at",)
        assert index.name == ("last_logged_in_at",)
        assert index.table_name == "kvindex_tests_index_user_last_logged_in_ats"

    def test_raises_for_unknown_field(self):
        with pytest.raises(InvalidField) as exc_info:
            IndexDescriptor(self.schema, ["password", "text"], config=self.config)

        assert exc_info.value.fields == ["text"]
        assert exc_info.value.source == "User"
        assert isinstance(exc_info.value, KvIndexException)

    def test_raises_for_unknown_range_key(self):
        with pytest.raises(InvalidField):
            IndexDescriptor(self.schema, "name", range_key="updated_at",
                            config=self.config)

    def test_rejects_empty_hash_keys(self):
        with pytest.raises(ValueError):
            IndexDescriptor(self.schema, [], config=self.config)

    def test_rejects_multiple_range_keys(self):
        with pytest.raises(ValueError):
            IndexDescriptor(self.schema, ["created_at", "last_logged_in_at"],
                            range=True, config=self.config)

    def test_rejects_non_numeric_range_key(self):
        with pytest.raises(ValueError, match="must be numeric"):
            IndexDescriptor(self.schema, "created_at", range_key="email",
                            config=self.config)

    def test_accepts_numeric_range_key_types(self, config):
        schema = RecordSchema("Score", {
            "player": FieldType.STRING,
            "points": FieldType.INTEGER,
            "average": FieldType.NUMBER,
        })
        assert IndexDescriptor(schema, "player", range_key="points", config=config).has_range_key
        assert IndexDescriptor(schema, "average", range=True, config=config).has_range_key

    def test_is_read_only(self):
        with pytest.raises(AttributeError):
            self.index.hash_keys = ("email",)


class TestPluralize:
    """Test cases for table name pluralization."""

    @pytest.mark.parametrize("word, plural", [
        ("name", "names"),
        ("password", "passwords"),
        ("created_at", "created_ats"),
        ("last_logged_in_at", "last_logged_in_ats"),
        ("category", "categories"),
    ])
    def test_pluralize(self, word, plural):
        assert pluralize(word) == plural
