from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class IndexedRecord(Protocol):
    """
    The view of a record that index maintenance depends on.

    Any record type can take part in indexing by exposing these five
    capabilities, usually through a thin adapter.
    """

    def get_attribute(self, name: str) -> Any:
        """Current value of an attribute (None when unset)."""
        ...

    def changed_attributes(self) -> Mapping[str, tuple[Any, Any]]:
        """Pending changes as name -> (old value, new value)."""
        ...

    def identity(self) -> Any:
        """The record's primary-key id, or None before it is persisted."""
        ...

    def is_new(self) -> bool:
        """True while the record has never been persisted."""
        ...

    def optional_ttl(self) -> Optional[Any]:
        """The record's time-to-live value, or None if it has none."""
        ...


@dataclass(frozen=True)
class RecordSnapshot:
    """
    Immutable copy of a record's indexing state.

    Snapshots let index values be derived from plain data without
    touching the live record again.
    """
    attributes: Mapping[str, Any]
    changes: Mapping[str, tuple[Any, Any]] = field(default_factory=dict)
    id: Any = None
    new_record: bool = False
    ttl: Optional[Any] = None

    def __post_init__(self):
        object.__setattr__(self, "attributes",
                           MappingProxyType(dict(self.attributes)))
        object.__setattr__(self, "changes", MappingProxyType(
            {str(k): tuple(v) for k, v in self.changes.items()}))

    @classmethod
    def of(cls, record: IndexedRecord,
           attribute_names: Optional[list[str]] = None) -> 'RecordSnapshot':
        """
        Copy any IndexedRecord into a snapshot.

        Args:
            record: The record to copy
            attribute_names: Attributes to capture; defaults to the
                record's changed attributes plus anything it declares

        Returns:
            RecordSnapshot: Frozen copy of the record's state
        """
        changes = dict(record.changed_attributes())
        names = list(attribute_names or [])
        if not names:
            declared = getattr(record, "attributes", None)
            names = list(declared) if isinstance(declared, Mapping) else []
            names.extend(n for n in changes if n not in names)

        return cls(
            attributes={name: record.get_attribute(name) for name in names},
            changes=changes,
            id=record.identity(),
            new_record=record.is_new(),
            ttl=record.optional_ttl(),
        )

    def get_attribute(self, name: str) -> Any:
        return self.attributes.get(str(name))

    def changed_attributes(self) -> Mapping[str, tuple[Any, Any]]:
        return self.changes

    def identity(self) -> Any:
        return self.id

    def is_new(self) -> bool:
        return self.new_record

    def optional_ttl(self) -> Optional[Any]:
        return self.ttl
