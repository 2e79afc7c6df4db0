import threading
from typing import Any, Iterable, Optional

import inflection
from cachetools import LRUCache, cached

from ..config import IndexConfig
from ..core.exceptions import InvalidField
from ..core.record import RecordSchema


@cached(cache=LRUCache(maxsize=512), lock=threading.Lock())
def pluralize(word: str) -> str:
    """Pluralize a key name the way table names expect (created_at -> created_ats)."""
    return inflection.pluralize(word)


def _flatten(tokens: Any) -> Iterable[Any]:
    if isinstance(tokens, (list, tuple, set, frozenset)):
        for token in tokens:
            yield from _flatten(token)
    elif tokens is not None:
        yield tokens


def canonicalize(tokens: Any) -> tuple[str, ...]:
    """
    Sort attribute names into their canonical order.

    Nested lists are flattened, None is dropped and duplicates are removed
    before sorting, so any spelling of the same combination of keys maps
    to the same tuple.

    Example:
        canonicalize(["gamma", ["alpha", "beta"], "alpha"])
        # -> ("alpha", "beta", "gamma")
    """
    return tuple(sorted({str(token) for token in _flatten(tokens)}))


class IndexDescriptor:
    """
    Identity of a single secondary index.

    A descriptor holds everything needed to address an index:
    1. The record schema the index covers
    2. Its hash keys (one or more attributes, canonical order)
    3. An optional single range key
    4. The table prefix and namespace used to build its table name

    Descriptors are immutable once built. Two descriptors built from the
    same keys in any order are equal and share a table.
    """

    def __init__(self, schema: RecordSchema, names: Any, *, range: bool = False,
                 range_key: Optional[str] = None, prefix: Optional[str] = None,
                 config: Optional[IndexConfig] = None):
        """
        Create a new index descriptor.

        Args:
            schema: Schema of the records this index covers
            names: Attribute name(s) forming the hash key
            range: Also use the hash attribute as the range key
            range_key: A separate attribute to use as the range key
            prefix: Table prefix; defaults to the lowercased schema name
            config: Namespace settings; defaults to IndexConfig()

        Raises:
            InvalidField: If any key is not declared on the schema
            ValueError: If no hash key is given, more than one range key
                results, or the range key is not a numeric attribute
        """
        hash_keys = canonicalize(names)
        if not hash_keys:
            raise ValueError("An index needs at least one hash key")

        if range:
            range_keys = hash_keys
        elif range_key is not None:
            range_keys = canonicalize(range_key)
        else:
            range_keys = ()

        if len(range_keys) > 1:
            raise ValueError(
                f"An index takes a single range key, got {', '.join(range_keys)}")

        self._source = schema
        self._config = config or IndexConfig()
        self._prefix = str(prefix) if prefix is not None else schema.name.lower()
        self._hash_keys = hash_keys
        self._range_keys = range_keys
        self._name = canonicalize([hash_keys, range_keys])

        missing = schema.missing_fields(self.keys)
        if missing:
            raise InvalidField(schema.name, missing)

        if self.has_range_key:
            range_type = schema.get_field_type(self.range_key)
            if not range_type.is_numeric():
                raise ValueError(
                    f"Range key '{self.range_key}' must be numeric, got {range_type.value}")

    @property
    def source(self) -> RecordSchema:
        return self._source

    @property
    def config(self) -> IndexConfig:
        return self._config

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def hash_keys(self) -> tuple[str, ...]:
        return self._hash_keys

    @property
    def range_keys(self) -> tuple[str, ...]:
        return self._range_keys

    @property
    def name(self) -> tuple[str, ...]:
        """Sorted union of hash and range keys."""
        return self._name

    @property
    def keys(self) -> tuple[str, ...]:
        """Hash keys followed by range keys, without duplicates."""
        return tuple(dict.fromkeys(self._hash_keys + self._range_keys))

    @property
    def range_key(self) -> Optional[str]:
        return self._range_keys[0] if self._range_keys else None

    @property
    def has_range_key(self) -> bool:
        return bool(self._range_keys)

    @property
    def table_name(self) -> str:
        """
        Name of the table holding this index's entries.

        Format: <namespace>_index_<prefix>_<plural key>_and_<plural key>...
        """
        keys = "_and_".join(pluralize(key) for key in self._name)
        return f"{self._config.namespace}_index_{self._prefix}_{keys}"

    def _identity(self) -> tuple:
        return (self._source.name, self._hash_keys, self._range_keys,
                self._prefix, self._config.namespace)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IndexDescriptor):
            return False
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def __str__(self) -> str:
        range_part = f", range={self.range_key}" if self.has_range_key else ""
        return f"IndexDescriptor({self._source.name}: {'.'.join(self._hash_keys)}{range_part})"

    def __repr__(self) -> str:
        return self.__str__()
