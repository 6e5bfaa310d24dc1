"""
Metadata schema model.

Builds immutable, queryable representations of metadata classes:
- MetadataClass (properties indexed by id and by semantic)
- MetadataClassProperty (resolved property descriptors)
- MetadataEnum (enum definitions referenced by properties)

Value decoding and schema-level aggregation live outside this package.
"""

from metaschema.core.errors import (
    DuplicateSemanticError,
    EnumDefinitionError,
    EnumResolutionError,
    InvalidArgumentError,
    MetadataSchemaError,
    PropertyDefinitionError,
)
from metaschema.schema.class_property import MetadataClassProperty
from metaschema.schema.enum_model import MetadataEnum, MetadataEnumValue, build_enums
from metaschema.schema.metadata_class import MetadataClass
from metaschema.schema.types import MetadataType

__all__ = [
    "DuplicateSemanticError",
    "EnumDefinitionError",
    "EnumResolutionError",
    "InvalidArgumentError",
    "MetadataClass",
    "MetadataClassProperty",
    "MetadataEnum",
    "MetadataEnumValue",
    "MetadataSchemaError",
    "MetadataType",
    "PropertyDefinitionError",
    "build_enums",
]
