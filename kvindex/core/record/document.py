from typing import Any, Mapping, Optional, TYPE_CHECKING
from ..exceptions import InvalidField
from .schema import RecordSchema

if TYPE_CHECKING:
    from ...storage.documents import DocumentRepository


class Document:
    """
    Represents a single schemaless record bound to a RecordSchema.

    A Document contains:
    1. RecordSchema: the attributes it is allowed to carry
    2. Current attribute values, plus the values at the last save
    3. Optional id: assigned once the document is persisted

    The difference between current and saved values is the document's
    pending change set, which is what index maintenance reads.
    """

    TTL_FIELD = "ttl"

    def __init__(self, schema: RecordSchema, id: Any = None, **attributes: Any):
        self.schema = schema
        self.id = id
        self.new_record = True
        self._values: dict[str, Any] = {name: None for name in schema.field_names()}
        self._saved: dict[str, Any] = dict(self._values)

        for name, value in attributes.items():
            self.set_field(name, value)

    @property
    def attributes(self) -> dict[str, Any]:
        """Return a copy of the current attribute values."""
        return dict(self._values)

    def set_field(self, name: str, value: Any) -> None:
        """
        Set the value of a declared attribute.

        Raises InvalidField if the schema does not declare the attribute.
        """
        if not self.schema.has_field(name):
            raise InvalidField(self.schema.name, [name])
        self._values[str(name)] = value

    def get_field(self, name: str) -> Any:
        """Get the current value of a declared attribute."""
        if not self.schema.has_field(name):
            raise InvalidField(self.schema.name, [name])
        return self._values[str(name)]

    def __getitem__(self, name: str) -> Any:
        return self.get_field(name)

    def __setitem__(self, name: str, value: Any) -> None:
        self.set_field(name, value)

    @property
    def changes(self) -> dict[str, tuple[Any, Any]]:
        """Pending changes as name -> (saved value, current value)."""
        return {name: (self._saved[name], value)
                for name, value in self._values.items()
                if value != self._saved[name]}

    def is_changed(self) -> bool:
        return bool(self.changes)

    def clear_changes(self) -> None:
        """Accept the current values as the saved state."""
        self._saved = dict(self._values)

    def load(self, id: Any, attributes: Mapping[str, Any]) -> 'Document':
        """Populate from stored data, leaving no pending changes."""
        self.id = id
        self.new_record = False
        for name, value in attributes.items():
            if self.schema.has_field(name):
                self._values[name] = value
        self.clear_changes()
        return self

    def save(self, repository: 'DocumentRepository') -> 'Document':
        return repository.save(self)

    def update_attributes(self, repository: 'DocumentRepository', **values: Any) -> 'Document':
        """Set several attributes and save the document."""
        for name, value in values.items():
            self.set_field(name, value)
        return repository.save(self)

    def delete(self, repository: 'DocumentRepository') -> None:
        repository.delete(self)

    # IndexedRecord capabilities

    def get_attribute(self, name: str) -> Any:
        return self._values.get(str(name))

    def changed_attributes(self) -> Mapping[str, tuple[Any, Any]]:
        return self.changes

    def identity(self) -> Any:
        return self.id

    def is_new(self) -> bool:
        return self.new_record

    def optional_ttl(self) -> Optional[Any]:
        if not self.schema.has_field(self.TTL_FIELD):
            return None
        return self._values.get(self.TTL_FIELD)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return False
        return (self.schema == other.schema and self.id == other.id and
                self._values == other._values)

    def __str__(self) -> str:
        values = ", ".join(f"{k}={v!r}" for k, v in self._values.items()
                           if v is not None)
        return f"Document({self.schema.name}#{self.id}: {values})"

    def __repr__(self) -> str:
        return self.__str__()
