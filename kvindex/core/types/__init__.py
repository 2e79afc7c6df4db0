from .type_enum import FieldType
from .coercion import to_number, to_segment, is_blank

__all__ = [
    'FieldType',
    'to_number',
    'to_segment',
    'is_blank',
]
