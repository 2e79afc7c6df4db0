from .values import (
    IndexLocation,
    derive_values,
    derive_current_location,
    derive_provenance_location,
)
from .maintainer import IndexMaintainer
from .manager import IndexManager

__all__ = [
    "IndexLocation",
    "derive_values",
    "derive_current_location",
    "derive_provenance_location",
    "IndexMaintainer",
    "IndexManager",
]
