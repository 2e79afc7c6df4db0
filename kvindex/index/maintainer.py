import logging
from typing import Optional

from ..catalog import IndexDescriptor
from ..core.record import IndexedRecord
from ..core.types import to_number
from ..storage.interfaces import StoreGateway
from ..storage.mutation import Mutation
from .values import IndexLocation, derive_current_location, derive_provenance_location, derive_values

logger = logging.getLogger(__name__)

IDS_FIELD = "ids"
TTL_FIELD = "ttl"


class IndexMaintainer:
    """
    Keeps one index in step with the records it covers.

    Responsibilities:
    1. Skip all work when none of the index's attributes changed
    2. Remove a record's id from the bucket it used to occupy
    3. Add the id to the bucket it occupies now

    Every write is a single merge-style update_item call (set add or set
    remove), so other ids in the same bucket are never overwritten. A save
    issues at most two store calls and a delete at most one; store errors
    are not caught here.
    """

    def __init__(self, descriptor: IndexDescriptor, store: StoreGateway):
        self.descriptor = descriptor
        self.store = store

    @property
    def table_name(self) -> str:
        return self.descriptor.table_name

    def is_index_current(self, record: IndexedRecord) -> bool:
        """True when none of this index's keys has a pending change."""
        changed = {str(name) for name in record.changed_attributes()}
        return not changed.intersection(self.descriptor.keys)

    def save(self, record: IndexedRecord) -> bool:
        """
        Move a record's id from its old bucket to its new one.

        The old bucket is cleaned first, so when old and new locations are
        the same the remove and add collapse into no net change.
        """
        if self.is_index_current(record):
            return True

        self.delete(record, changed_attributes=True)

        location = derive_current_location(self.descriptor, record)
        if not location.is_usable(self.descriptor.has_range_key):
            logger.debug(f"{self.table_name}: record {record.identity()} "
                         f"no longer qualifies, skipping add")
            return True

        mutation = Mutation().add(IDS_FIELD, [record.identity()])
        ttl = record.optional_ttl()
        if ttl is not None:
            mutation.set(TTL_FIELD, to_number(ttl))

        self._update(location, mutation)
        return True

    def delete(self, record: IndexedRecord, changed_attributes: bool = False) -> bool:
        """
        Remove a record's id from this index.

        Args:
            record: The record to remove
            changed_attributes: Remove it from the location derived from the
                record's old attribute values instead of its current ones
        """
        if record.is_new():
            return True
        if self.is_index_current(record):
            return True

        location = derive_values(self.descriptor, record, changed_attributes)
        return self._remove(record, location)

    def purge(self, record: IndexedRecord) -> bool:
        """
        Remove a destroyed record's id from the bucket it was saved to.

        Unlike delete, this does not short-circuit on an empty change set:
        a persisted record being destroyed has nothing pending but still
        occupies a bucket.
        """
        if record.is_new():
            return True

        location = derive_provenance_location(self.descriptor, record)
        return self._remove(record, location)

    def _remove(self, record: IndexedRecord, location: IndexLocation) -> bool:
        if not location.is_usable(self.descriptor.has_range_key):
            logger.debug(f"{self.table_name}: no usable location for "
                         f"record {record.identity()}, skipping remove")
            return True

        self._update(location, Mutation().remove(IDS_FIELD, [record.identity()]))
        return True

    def _update(self, location: IndexLocation, mutation: Mutation) -> None:
        range_value: Optional[float] = location.range_value if self.descriptor.has_range_key else None
        logger.debug(f"{self.table_name}[{location.hash_value!r}, {range_value!r}]: {mutation}")
        self.store.update_item(self.table_name, location.hash_value, mutation,
                               range_value=range_value)

    def __str__(self) -> str:
        return f"IndexMaintainer({self.table_name})"

    def __repr__(self) -> str:
        return self.__str__()
