import logging
from typing import Any, Iterable, Optional

from ..catalog import IndexDescriptor, IndexInfo, canonicalize
from ..config import IndexConfig
from ..core.record import IndexedRecord, RecordSchema
from ..storage.interfaces import StoreGateway
from .maintainer import IDS_FIELD, IndexMaintainer
from .values import derive_values

logger = logging.getLogger(__name__)


class IndexManager:
    """
    Manages all indexes declared for one record schema.

    Responsibilities:
    1. Declare indexes and look them up by key combination
    2. Provision index tables in the store
    3. Fan record saves and deletes out to every index
    4. Point lookups of ids by hash value (and range value)
    """

    def __init__(self, schema: RecordSchema, store: StoreGateway,
                 config: Optional[IndexConfig] = None):
        self.schema = schema
        self.store = store
        self.config = config or IndexConfig()

        # Map: canonical key names -> maintainer
        self._maintainers: dict[tuple[str, ...], IndexMaintainer] = {}

    def index(self, names: Any, **options: Any) -> IndexDescriptor:
        """
        Declare an index on one or more attributes.

        Args:
            names: Hash key attribute name(s)
            **options: range, range_key or prefix, as IndexDescriptor takes them

        Returns:
            The declared IndexDescriptor; declaring the same keys twice
            returns the first descriptor

        Raises:
            ValueError: If another index on the same attributes splits them
                differently between hash and range keys
        """
        descriptor = IndexDescriptor(self.schema, names, config=self.config, **options)
        existing = self._maintainers.get(descriptor.name)
        if existing is not None:
            if existing.descriptor != descriptor:
                raise ValueError(
                    f"{descriptor} conflicts with already declared {existing.descriptor}")
            return existing.descriptor

        self._maintainers[descriptor.name] = IndexMaintainer(descriptor, self.store)
        logger.debug(f"Declared index {descriptor.table_name}")
        return descriptor

    def find_index(self, names: Any) -> Optional[IndexDescriptor]:
        """Find the index covering exactly these attributes, if one exists."""
        maintainer = self._maintainers.get(canonicalize(names))
        return maintainer.descriptor if maintainer else None

    def get_maintainer(self, names: Any) -> Optional[IndexMaintainer]:
        return self._maintainers.get(canonicalize(names))

    def has_index(self, names: Any) -> bool:
        return self.find_index(names) is not None

    @property
    def indexes(self) -> list[IndexDescriptor]:
        return [m.descriptor for m in self._maintainers.values()]

    def create_tables(self) -> list[str]:
        """
        Create the table of every declared index that does not exist yet.

        Returns:
            Names of the tables that were created
        """
        created = []
        for maintainer in self._maintainers.values():
            descriptor = maintainer.descriptor
            if self.store.has_table(descriptor.table_name):
                continue
            self.store.create_table(descriptor.table_name,
                                    range_key=descriptor.has_range_key)
            created.append(descriptor.table_name)

        if created:
            logger.info(f"Created {len(created)} index tables for {self.schema.name}")
        return created

    def save_indexes(self, record: IndexedRecord) -> None:
        for maintainer in self._maintainers.values():
            maintainer.save(record)

    def delete_indexes(self, record: IndexedRecord) -> None:
        for maintainer in self._maintainers.values():
            maintainer.delete(record)

    def purge_indexes(self, record: IndexedRecord) -> None:
        for maintainer in self._maintainers.values():
            maintainer.purge(record)

    def lookup(self, names: Any, values: Iterable[Any],
               range_value: Optional[Any] = None) -> set:
        """
        Find the ids of records with the given attribute values.

        Args:
            names: Attributes to look up by; an index must cover exactly these
            values: Values for names, in the same order as names
            range_value: Range value to look up, for ranged indexes

        Returns:
            The set of matching ids, empty when nothing matches

        Raises:
            KeyError: If no index covers names
        """
        name_list = [str(name) for name in (names if isinstance(names, (list, tuple)) else [names])]
        value_list = list(values) if isinstance(values, (list, tuple)) else [values]
        if len(name_list) != len(value_list):
            raise ValueError(
                f"Got {len(value_list)} values for {len(name_list)} attributes")

        attributes = dict(zip(name_list, value_list))
        descriptor = self._find_lookup_index(name_list, ranged=range_value is not None)
        if descriptor is None:
            raise KeyError(f"No index on {', '.join(canonicalize(name_list))}")

        if descriptor.has_range_key and range_value is not None:
            attributes[descriptor.range_key] = range_value

        location = derive_values(descriptor, attributes)
        if not location.is_usable(descriptor.has_range_key):
            return set()

        item = self.store.read(descriptor.table_name, location.hash_value,
                               location.range_value if descriptor.has_range_key else None)
        return set(item.get(IDS_FIELD) or ()) if item else set()

    def _find_lookup_index(self, names: list[str], ranged: bool) -> Optional[IndexDescriptor]:
        hash_keys = canonicalize(names)
        for descriptor in self.indexes:
            if descriptor.hash_keys == hash_keys and descriptor.has_range_key == ranged:
                return descriptor
        return self.find_index(names)

    def describe(self) -> list[IndexInfo]:
        return [IndexInfo.from_descriptor(d) for d in self.indexes]

    def __str__(self) -> str:
        return f"IndexManager({len(self._maintainers)} indexes on {self.schema.name})"

    def __repr__(self) -> str:
        return self.__str__()
