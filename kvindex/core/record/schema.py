from typing import Iterable, Optional
from ..types import FieldType


class RecordSchema:
    """
    Schema descriptor for a record type.

    A RecordSchema defines:
    1. The name of the record type (used for default table prefixes)
    2. The declared attribute names and their types
    3. Methods to check and look up declared attributes

    The key-value store itself is schemaless; this is the only place
    that knows which attributes a record type is allowed to have.
    """

    def __init__(self, name: str, fields: dict[str, FieldType]):
        if not name:
            raise ValueError("RecordSchema must have a name")
        if not fields:
            raise ValueError("RecordSchema must have at least one field")

        self.name = name
        self.fields = dict(fields)

    def has_field(self, field_name: str) -> bool:
        """Check whether an attribute is declared on this schema."""
        return str(field_name) in self.fields

    def field_names(self) -> list[str]:
        """Return the declared attribute names in declaration order."""
        return list(self.fields)

    def get_field_type(self, field_name: str) -> Optional[FieldType]:
        """Get the declared type of an attribute, or None if undeclared."""
        return self.fields.get(str(field_name))

    def missing_fields(self, field_names: Iterable[str]) -> list[str]:
        """Return the names from field_names that are not declared here."""
        return [name for name in field_names if not self.has_field(name)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RecordSchema):
            return False
        return self.name == other.name and self.fields == other.fields

    def __hash__(self) -> int:
        return hash((self.name, tuple(self.fields)))

    def __str__(self) -> str:
        parts = [f"{field_type.value}({name})"
                 for name, field_type in self.fields.items()]
        return f"RecordSchema({self.name}: {', '.join(parts)})"

    def __repr__(self) -> str:
        return self.__str__()
