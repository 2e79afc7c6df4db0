import logging
import uuid
from typing import Any, Optional

from ..catalog import pluralize
from ..core.record import Document, RecordSchema
from ..index import IndexManager
from .interfaces import StoreGateway, HASH_KEY
from .mutation import Mutation

logger = logging.getLogger(__name__)


class DocumentRepository:
    """
    High-level interface for persisting Documents of one schema.

    Records are stored by id in their own table; every save and delete
    is fanned out to the schema's indexes so index entries follow the
    record through its lifecycle.
    """

    def __init__(self, schema: RecordSchema, store: StoreGateway, indexes: IndexManager):
        if indexes.schema != schema:
            raise ValueError(
                f"Index manager covers '{indexes.schema.name}', not '{schema.name}'")
        self.schema = schema
        self.store = store
        self.indexes = indexes

    @property
    def table_name(self) -> str:
        return f"{self.indexes.config.namespace}_{pluralize(self.schema.name.lower())}"

    def create_tables(self) -> None:
        """Create the record table and every index table that is missing."""
        if not self.store.has_table(self.table_name):
            self.store.create_table(self.table_name)
        self.indexes.create_tables()

    def new(self, **attributes: Any) -> Document:
        return Document(self.schema, **attributes)

    def create(self, **attributes: Any) -> Document:
        return self.save(self.new(**attributes))

    def save(self, document: Document) -> Document:
        """
        Persist a document and update its index entries.

        New documents get a random id. Index maintenance runs while the
        document's changes are still pending, then the changes are cleared.
        """
        if document.id is None:
            document.id = uuid.uuid4().hex

        changes = document.changes
        if document.new_record:
            fields = document.attributes
        else:
            fields = {name: new for name, (_old, new) in changes.items()}

        mutation = Mutation()
        for name, value in fields.items():
            mutation.set(name, value)
        if document.new_record or not mutation.is_empty():
            mutation.set(HASH_KEY, document.id)
            self.store.update_item(self.table_name, document.id, mutation)

        self.indexes.save_indexes(document)

        document.new_record = False
        document.clear_changes()
        logger.debug(f"Saved {document}")
        return document

    def delete(self, document: Document) -> None:
        """Remove a document and its id from every index."""
        if document.new_record:
            return

        self.indexes.purge_indexes(document)
        self.store.delete_item(self.table_name, document.id)
        logger.debug(f"Deleted {document}")

    def find(self, id: Any) -> Optional[Document]:
        """Load a document by id, or None when it does not exist."""
        item = self.store.read(self.table_name, id)
        if item is None:
            return None
        attributes = {k: v for k, v in item.items() if k != HASH_KEY}
        return Document(self.schema).load(id, attributes)

    def find_all_by(self, names: Any, values: Any,
                    range_value: Optional[Any] = None) -> list[Document]:
        """
        Load every document an index lists for the given values.

        Ids whose record no longer exists are skipped.
        """
        ids = self.indexes.lookup(names, values, range_value=range_value)
        documents = (self.find(id) for id in sorted(ids, key=str))
        return [document for document in documents if document is not None]
