from .exceptions import (
    KvIndexException,
    InvalidField,
    StoreError,
    TableNotFoundError,
    TableExistsError,
)
from .record import RecordSchema, IndexedRecord, RecordSnapshot, Document
from .types import FieldType

__all__ = [
    "KvIndexException",
    "InvalidField",
    "StoreError",
    "TableNotFoundError",
    "TableExistsError",
    "RecordSchema",
    "IndexedRecord",
    "RecordSnapshot",
    "Document",
    "FieldType",
]
