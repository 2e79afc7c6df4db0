"""
Derived secondary indexes for schemaless key-value stores.

Each index maps the values of one or more hash attributes (and an
optional numeric range attribute) to the ids of the records that
currently have those values, and is kept current as records change.
"""

from .config import IndexConfig
from .core import (
    KvIndexException,
    InvalidField,
    StoreError,
    TableNotFoundError,
    TableExistsError,
    RecordSchema,
    IndexedRecord,
    RecordSnapshot,
    Document,
    FieldType,
)
from .catalog import IndexDescriptor, IndexInfo, canonicalize
from .storage import StoreGateway, Mutation, MemoryStore
from .index import (
    IndexLocation,
    IndexMaintainer,
    IndexManager,
    derive_values,
    derive_current_location,
    derive_provenance_location,
)
from .storage.documents import DocumentRepository

__all__ = [
    "IndexConfig",
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
    "IndexDescriptor",
    "IndexInfo",
    "canonicalize",
    "StoreGateway",
    "Mutation",
    "MemoryStore",
    "IndexLocation",
    "IndexMaintainer",
    "IndexManager",
    "derive_values",
    "derive_current_location",
    "derive_provenance_location",
    "DocumentRepository",
]
