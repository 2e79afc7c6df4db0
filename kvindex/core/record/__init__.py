from .schema import RecordSchema
from .indexed_record import IndexedRecord, RecordSnapshot
from .document import Document

__all__ = ["RecordSchema", "IndexedRecord", "RecordSnapshot", "Document"]
