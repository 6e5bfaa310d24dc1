from __future__ import annotations

import copy
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from metaschema.core.errors import (
    EnumResolutionError,
    InvalidArgumentError,
    PropertyDefinitionError,
)
from metaschema.schema.definitions import PropertyDefinition, describe_validation_error
from metaschema.schema.enum_model import MetadataEnum
from metaschema.schema.types import MetadataType


def _resolve_type(property_id: str, name: Optional[str], field_name: str) -> Optional[MetadataType]:
    try:
        return MetadataType.from_name(name)
    except ValueError as exc:
        raise PropertyDefinitionError(property_id=property_id, reason=f"{field_name}: {exc}") from exc


class MetadataClassProperty:
    """
    A single property of a metadata class with its type and enum resolved.

    Read-only once built. The definition is read during construction only;
    `extras` is deep-copied so the property never aliases caller data.
    """

    __slots__ = (
        "_id",
        "_name",
        "_description",
        "_type",
        "_component_type",
        "_component_count",
        "_enum_type",
        "_value_type",
        "_normalized",
        "_max",
        "_min",
        "_default",
        "_optional",
        "_semantic",
        "_extras",
    )

    def __init__(
        self,
        *,
        id: str,
        property_definition: Union[Mapping[str, Any], PropertyDefinition],
        enums: Optional[Mapping[str, MetadataEnum]] = None,
    ):
        if not isinstance(id, str) or not id:
            raise InvalidArgumentError(argument="id", reason="must be a non-empty string")

        if isinstance(property_definition, PropertyDefinition):
            parsed = property_definition
        elif isinstance(property_definition, Mapping):
            try:
                parsed = PropertyDefinition.model_validate(dict(property_definition))
            except ValidationError as exc:
                raise PropertyDefinitionError(property_id=id, reason=describe_validation_error(exc)) from exc
        else:
            raise InvalidArgumentError(argument="property_definition", reason="must be an object")

        if enums is None:
            enums = {}
        elif not isinstance(enums, Mapping):
            raise InvalidArgumentError(argument="enums", reason="must be a mapping of enum id to MetadataEnum")

        type_ = _resolve_type(id, parsed.type, "type")
        component_type = _resolve_type(id, parsed.component_type, "componentType")

        if type_ is MetadataType.ARRAY:
            if component_type is None:
                raise PropertyDefinitionError(property_id=id, reason="componentType is required for ARRAY")
            if component_type is MetadataType.ARRAY:
                raise PropertyDefinitionError(property_id=id, reason="nested ARRAY is not supported")

        if parsed.component_count is not None and parsed.component_count < 1:
            raise PropertyDefinitionError(property_id=id, reason="componentCount must be >= 1")

        # ENUM or ARRAY of ENUM
        base_type = component_type if type_ is MetadataType.ARRAY else type_
        enum_type: Optional[MetadataEnum] = None
        if base_type is MetadataType.ENUM:
            if not parsed.enum_type:
                raise PropertyDefinitionError(property_id=id, reason="enumType is required for ENUM")
            enum_type = enums.get(parsed.enum_type)
            if enum_type is None:
                raise EnumResolutionError(property_id=id, enum_id=parsed.enum_type)

        if parsed.normalized and not base_type.is_integer_type():
            raise PropertyDefinitionError(
                property_id=id,
                reason=f"normalized is only valid for integer types, got {base_type.value}",
            )

        if enum_type is not None:
            value_type = enum_type.value_type
        else:
            value_type = base_type

        self._id = id
        self._name = parsed.name
        self._description = parsed.description
        self._type = type_
        self._component_type = component_type
        self._component_count = parsed.component_count
        self._enum_type = enum_type
        self._value_type = value_type
        self._normalized = bool(parsed.normalized)
        self._max = copy.deepcopy(parsed.max)
        self._min = copy.deepcopy(parsed.min)
        self._default = copy.deepcopy(parsed.default)
        self._optional = bool(parsed.optional)
        self._semantic = parsed.semantic
        self._extras = copy.deepcopy(parsed.extras)

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def description(self) -> Optional[str]:
        return self._description

    @property
    def type(self) -> MetadataType:
        return self._type

    @property
    def component_type(self) -> Optional[MetadataType]:
        return self._component_type

    @property
    def component_count(self) -> Optional[int]:
        return self._component_count

    @property
    def enum_type(self) -> Optional[MetadataEnum]:
        return self._enum_type

    @property
    def value_type(self) -> MetadataType:
        """Type of the stored values: the enum's value type for enums, the component type for arrays."""
        return self._value_type

    @property
    def normalized(self) -> bool:
        return self._normalized

    @property
    def max(self) -> Any:
        return self._max

    @property
    def min(self) -> Any:
        return self._min

    @property
    def default(self) -> Any:
        return self._default

    @property
    def optional(self) -> bool:
        return self._optional

    @property
    def semantic(self) -> Optional[str]:
        return self._semantic

    @property
    def extras(self) -> Any:
        return self._extras

    def __repr__(self) -> str:
        return f"MetadataClassProperty(id={self._id!r}, type={self._type.value}, semantic={self._semantic!r})"
