"""Schema construction exceptions.

Every error raised while building classes, properties or enums derives from
MetadataSchemaError. Nothing here is retried or recovered locally.
"""

from __future__ import annotations

from typing import Optional, Sequence


class MetadataSchemaError(Exception):
    pass


class InvalidArgumentError(MetadataSchemaError, ValueError):
    def __init__(self, *, argument: str, reason: str):
        self.argument = argument
        self.reason = reason
        super().__init__(f"Invalid argument {argument}: {reason}")


class PropertyDefinitionError(MetadataSchemaError):
    def __init__(self, *, property_id: str, reason: str):
        self.property_id = property_id
        self.reason = reason
        super().__init__(f"Invalid property definition for property={property_id}: {reason}")


class EnumResolutionError(PropertyDefinitionError):
    def __init__(self, *, property_id: str, enum_id: str):
        self.enum_id = enum_id
        super().__init__(
            property_id=property_id,
            reason=f"enumType {enum_id!r} is not defined",
        )


class EnumDefinitionError(MetadataSchemaError):
    def __init__(self, *, enum_id: Optional[str], reason: str):
        self.enum_id = enum_id
        self.reason = reason
        super().__init__(f"Invalid enum definition for enum={enum_id}: {reason}")


class DuplicateSemanticError(MetadataSchemaError):
    def __init__(self, *, class_id: str, semantic: str, property_ids: Sequence[str]):
        self.class_id = class_id
        self.semantic = semantic
        self.property_ids = list(property_ids)
        super().__init__(
            f"Semantic {semantic!r} declared more than once in class={class_id} "
            f"(properties={', '.join(self.property_ids)})"
        )
