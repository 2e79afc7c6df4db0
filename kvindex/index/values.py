from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from ..catalog import IndexDescriptor
from ..core.record import IndexedRecord
from ..core.types import is_blank, to_number, to_segment


@dataclass(frozen=True)
class IndexLocation:
    """
    Where a record sits in one index.

    hash_value is None when none of the hash attributes has a value,
    which is different from an empty string. range_value is set for every
    ranged index; range_missing records that it was coerced from a
    missing attribute.
    """
    hash_value: Optional[str] = None
    range_value: Optional[float] = None
    range_missing: bool = False

    def as_dict(self) -> dict[str, Any]:
        """The present values only, keyed hash_value and range_value."""
        values: dict[str, Any] = {}
        if self.hash_value is not None:
            values["hash_value"] = self.hash_value
        if self.range_value is not None:
            values["range_value"] = self.range_value
        return values

    def is_usable(self, has_range_key: bool) -> bool:
        """Whether a store operation may be issued at this location."""
        if is_blank(self.hash_value):
            return False
        if has_range_key and (self.range_value is None or self.range_missing):
            return False
        return True


def _attributes(source: Union[Mapping[str, Any], IndexedRecord],
                keys: tuple[str, ...], use_changed_only: bool) -> dict[str, Any]:
    if isinstance(source, Mapping):
        if use_changed_only:
            raise TypeError("A plain mapping has no pending changes to read old values from")
        return {str(k): v for k, v in source.items()}

    attrs = {key: source.get_attribute(key) for key in keys}
    if use_changed_only:
        for name, (old, _new) in source.changed_attributes().items():
            if name in attrs:
                attrs[name] = old
    return attrs


def derive_values(descriptor: IndexDescriptor,
                  source: Union[Mapping[str, Any], IndexedRecord],
                  use_changed_only: bool = False) -> IndexLocation:
    """
    Compute the hash and range values of a record for one index.

    Args:
        descriptor: The index to compute values for
        source: A plain attribute mapping, or a record
        use_changed_only: Substitute the old value of every changed
            attribute, giving the location the record used to occupy;
            only valid for records

    Returns:
        IndexLocation: The derived hash and range values

    Raises:
        TypeError: If use_changed_only is set for a plain mapping
    """
    attrs = _attributes(source, descriptor.keys, use_changed_only)

    hash_value = None
    if any(attrs.get(key) is not None for key in descriptor.hash_keys):
        hash_value = ".".join(to_segment(attrs.get(key)) for key in descriptor.hash_keys)

    range_value = None
    range_missing = False
    if descriptor.has_range_key:
        raw = attrs.get(descriptor.range_key)
        range_value = to_number(raw)
        range_missing = raw is None

    return IndexLocation(hash_value, range_value, range_missing)


def derive_current_location(descriptor: IndexDescriptor,
                            record: IndexedRecord) -> IndexLocation:
    """The location a record occupies with its current attribute values."""
    return derive_values(descriptor, record, use_changed_only=False)


def derive_provenance_location(descriptor: IndexDescriptor,
                               record: IndexedRecord) -> IndexLocation:
    """The location a record occupied before its pending changes."""
    return derive_values(descriptor, record, use_changed_only=True)
