from __future__ import annotations

from enum import Enum
from typing import Optional


class MetadataType(str, Enum):
    INT8 = "INT8"
    UINT8 = "UINT8"
    INT16 = "INT16"
    UINT16 = "UINT16"
    INT32 = "INT32"
    UINT32 = "UINT32"
    INT64 = "INT64"
    UINT64 = "UINT64"
    FLOAT32 = "FLOAT32"
    FLOAT64 = "FLOAT64"
    BOOLEAN = "BOOLEAN"
    STRING = "STRING"
    ENUM = "ENUM"
    ARRAY = "ARRAY"

    @classmethod
    def from_name(cls, name: Optional[str]) -> Optional["MetadataType"]:
        """Resolve a type name; None passes through, unknown names raise ValueError."""
        if name is None:
            return None
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"Unknown metadata type: {name!r}") from None

    def is_integer_type(self) -> bool:
        return self in _INTEGER_TYPES

    def is_numeric_type(self) -> bool:
        return self in _INTEGER_TYPES or self in (MetadataType.FLOAT32, MetadataType.FLOAT64)


_INTEGER_TYPES = frozenset(
    {
        MetadataType.INT8,
        MetadataType.UINT8,
        MetadataType.INT16,
        MetadataType.UINT16,
        MetadataType.INT32,
        MetadataType.UINT32,
        MetadataType.INT64,
        MetadataType.UINT64,
    }
)
