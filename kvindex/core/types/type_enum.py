from enum import Enum


class FieldType(Enum):
    """
    Enum for declared attribute types.
    """
    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATETIME = "datetime"
    SET = "set"
    SERIALIZED = "serialized"

    def is_numeric(self) -> bool:
        """Whether values of this type coerce to a number without loss."""
        return self in (FieldType.INTEGER, FieldType.NUMBER, FieldType.DATETIME)
