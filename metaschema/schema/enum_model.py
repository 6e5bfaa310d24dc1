from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from metaschema.core.errors import EnumDefinitionError, InvalidArgumentError
from metaschema.schema.definitions import EnumDefinition, describe_validation_error
from metaschema.schema.types import MetadataType


@dataclass(frozen=True)
class MetadataEnumValue:
    value: int
    name: str
    description: Optional[str] = None
    extras: Any = None


@dataclass(frozen=True)
class MetadataEnum:
    id: str
    values: Tuple[MetadataEnumValue, ...] = field(default_factory=tuple)
    value_type: MetadataType = MetadataType.UINT16
    name: Optional[str] = None
    description: Optional[str] = None
    extras: Any = None

    @classmethod
    def from_definition(
        cls, enum_id: str, definition: Union[Mapping[str, Any], EnumDefinition]
    ) -> "MetadataEnum":
        if not isinstance(enum_id, str) or not enum_id:
            raise InvalidArgumentError(argument="enum_id", reason="must be a non-empty string")

        if isinstance(definition, EnumDefinition):
            parsed = definition
        elif isinstance(definition, Mapping):
            try:
                parsed = EnumDefinition.model_validate(dict(definition))
            except ValidationError as exc:
                raise EnumDefinitionError(enum_id=enum_id, reason=describe_validation_error(exc)) from exc
        else:
            raise EnumDefinitionError(enum_id=enum_id, reason="definition must be an object")

        try:
            value_type = MetadataType.from_name(parsed.value_type)
        except ValueError as exc:
            raise EnumDefinitionError(enum_id=enum_id, reason=str(exc)) from exc
        if not value_type.is_integer_type():
            raise EnumDefinitionError(
                enum_id=enum_id,
                reason=f"valueType must be an integer type, got {value_type.value}",
            )

        values = tuple(
            MetadataEnumValue(
                value=v.value,
                name=v.name,
                description=v.description,
                extras=copy.deepcopy(v.extras),
            )
            for v in parsed.values
        )

        return cls(
            id=enum_id,
            values=values,
            value_type=value_type,
            name=parsed.name,
            description=parsed.description,
            extras=copy.deepcopy(parsed.extras),
        )

    def name_for(self, value: int) -> Optional[str]:
        for v in self.values:
            if v.value == value:
                return v.name
        return None

    def value_for(self, name: str) -> Optional[int]:
        for v in self.values:
            if v.name == name:
                return v.value
        return None


def build_enums(definitions: Optional[Mapping[str, Any]]) -> Dict[str, MetadataEnum]:
    """Build an enum id -> MetadataEnum lookup from a JSON-like `enums` section."""
    if definitions is None:
        return {}
    if not isinstance(definitions, Mapping):
        raise InvalidArgumentError(argument="definitions", reason="must be an object")
    return {enum_id: MetadataEnum.from_definition(enum_id, d) for enum_id, d in definitions.items()}
