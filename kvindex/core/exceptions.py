"""Custom exceptions for the index system."""


class KvIndexException(Exception):
    """Base exception for index-related errors."""
    pass


class InvalidField(KvIndexException):
    """Raised when an index references a field its source does not declare."""

    def __init__(self, source: str, fields: list[str]):
        self.source = source
        self.fields = list(fields)
        super().__init__(
            f"A key specified for an index is not a field of '{source}': "
            f"{', '.join(self.fields)}")


class StoreError(KvIndexException):
    """Base class for backing store errors."""
    pass


class TableNotFoundError(StoreError):
    """Raised when the store has no table with the requested name."""

    def __init__(self, table_name: str):
        self.table_name = table_name
        super().__init__(f"Table '{table_name}' does not exist")


class TableExistsError(StoreError):
    """Raised when a table is created twice."""

    def __init__(self, table_name: str):
        self.table_name = table_name
        super().__init__(f"Table '{table_name}' already exists")
