"""Input shapes for class, property and enum definitions.

These models perform the minimal shape checks on JSON-like definitions
(correct container types, strings where strings are expected). They do not
resolve types or enums; that happens in the model classes built from them.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class EnumValueDefinition(BaseModel):
    value: int
    name: str
    description: Optional[str] = None
    extras: Any = None


class EnumDefinition(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    values: List[EnumValueDefinition]
    value_type: str = Field(default="UINT16", alias="valueType")
    name: Optional[str] = None
    description: Optional[str] = None
    extras: Any = None


class PropertyDefinition(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: str
    component_type: Optional[str] = Field(default=None, alias="componentType")
    component_count: Optional[int] = Field(default=None, alias="componentCount")
    enum_type: Optional[str] = Field(default=None, alias="enumType")
    normalized: bool = False
    max: Any = None
    min: Any = None
    default: Any = None
    optional: bool = False
    semantic: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    extras: Any = None


class ClassDefinition(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    # Property definitions stay raw; each one is shape-checked by its property model.
    properties: Optional[Dict[str, Any]] = None
    extras: Any = None


def describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "<root>"
        parts.append(f"{loc}: {err.get('msg', 'invalid')}")
    return "; ".join(parts)
