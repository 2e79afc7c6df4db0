import time
from dataclasses import dataclass, asdict, field
from typing import Optional

from .index_descriptor import IndexDescriptor


@dataclass
class IndexInfo:
    """
    Information about a declared index.

    🏷️ Reporting view of an IndexDescriptor: where its entries live and
    which attributes feed its hash and range values.
    """

    """📋 Name of the table holding the index entries"""
    table_name: str

    """📚 Name of the record type the index covers"""
    source: str

    """🔑 Hash key attributes in canonical order"""
    hash_keys: list[str] = field(default_factory=list)

    """📏 Range key attribute, if any"""
    range_key: Optional[str] = None

    """⏰ Unix timestamp when the index was declared"""
    created_at: float = 0.0

    def __post_init__(self):
        """
        🎬 Initialize declaration timestamp if not provided.
        """
        if self.created_at == 0:
            self.created_at = time.time()

    @classmethod
    def from_descriptor(cls, descriptor: IndexDescriptor) -> 'IndexInfo':
        return cls(
            table_name=descriptor.table_name,
            source=descriptor.source.name,
            hash_keys=list(descriptor.hash_keys),
            range_key=descriptor.range_key,
        )

    def to_dict(self) -> dict:
        """
        📦 Convert index info to dictionary format for serialization.

        Returns:
            dict: Dictionary representation of the index
        """
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> 'IndexInfo':
        """
        📥 Create index info from dictionary representation.

        Args:
            data: Dictionary containing index attributes

        Returns:
            IndexInfo: New index info instance
        """
        return cls(**data)
