from .index_descriptor import IndexDescriptor, canonicalize, pluralize
from .index_info import IndexInfo

__all__ = [
    "IndexDescriptor",
    "IndexInfo",
    "canonicalize",
    "pluralize",
]
