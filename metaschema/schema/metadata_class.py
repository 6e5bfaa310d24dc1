from __future__ import annotations

import copy
import logging
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import ValidationError

from metaschema.core.config import SchemaSettings, load_settings
from metaschema.core.errors import DuplicateSemanticError, InvalidArgumentError
from metaschema.core.metrics import inc_class_built, inc_duplicate_semantic
from metaschema.schema.class_property import MetadataClassProperty
from metaschema.schema.definitions import ClassDefinition, describe_validation_error
from metaschema.schema.enum_model import MetadataEnum

_log = logging.getLogger("metaschema.schema")


def _parse_class_definition(class_definition: Any) -> ClassDefinition:
    if isinstance(class_definition, ClassDefinition):
        return class_definition
    if not isinstance(class_definition, Mapping):
        raise InvalidArgumentError(argument="class_definition", reason="must be an object")
    try:
        return ClassDefinition.model_validate(dict(class_definition))
    except ValidationError as exc:
        raise InvalidArgumentError(
            argument="class_definition",
            reason=describe_validation_error(exc),
        ) from exc


class MetadataClass:
    """
    A metadata class: a named record type and its properties.

    Properties are indexed by id (definition order) and by semantic. When two
    properties share a semantic the later one owns the semantic slot; both
    stay reachable through `properties`.
    """

    __slots__ = (
        "_id",
        "_name",
        "_description",
        "_extras",
        "_properties",
        "_properties_by_semantic",
    )

    def __init__(
        self,
        *,
        id: str,
        class_definition: Union[Mapping[str, Any], ClassDefinition],
        enums: Optional[Mapping[str, MetadataEnum]] = None,
        settings: Optional[SchemaSettings] = None,
    ):
        if not isinstance(id, str) or not id:
            raise InvalidArgumentError(argument="id", reason="must be a non-empty string")

        definition = _parse_class_definition(class_definition)
        cfg = load_settings(settings)

        properties: Dict[str, MetadataClassProperty] = {}
        properties_by_semantic: Dict[str, MetadataClassProperty] = {}

        for property_id, property_definition in (definition.properties or {}).items():
            prop = MetadataClassProperty(
                id=property_id,
                property_definition=property_definition,
                enums=enums,
            )
            properties[property_id] = prop

            semantic = prop.semantic
            if not semantic:
                continue

            previous = properties_by_semantic.get(semantic)
            if previous is not None:
                if cfg.strict_semantics:
                    raise DuplicateSemanticError(
                        class_id=id,
                        semantic=semantic,
                        property_ids=[previous.id, property_id],
                    )
                inc_duplicate_semantic()
                _log.log(
                    logging.WARNING if cfg.warn_duplicate_semantics else logging.DEBUG,
                    "metaschema.class duplicate semantic class=%s semantic=%s replaced=%s by=%s",
                    id,
                    semantic,
                    previous.id,
                    property_id,
                )
            properties_by_semantic[semantic] = prop

        self._id = id
        self._name = definition.name
        self._description = definition.description
        # Own copy; the caller may mutate or drop the source definition.
        self._extras = copy.deepcopy(definition.extras)
        self._properties = MappingProxyType(properties)
        self._properties_by_semantic = MappingProxyType(properties_by_semantic)

        inc_class_built(len(properties))
        _log.debug(
            "metaschema.class built class=%s properties=%s semantics=%s",
            id,
            len(properties),
            len(properties_by_semantic),
        )

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
    def extras(self) -> Any:
        return self._extras

    @property
    def properties(self) -> Mapping[str, MetadataClassProperty]:
        return self._properties

    @property
    def properties_by_semantic(self) -> Mapping[str, MetadataClassProperty]:
        return self._properties_by_semantic

    def get_property(self, property_id: str) -> Optional[MetadataClassProperty]:
        return self._properties.get(property_id)

    def get_property_by_semantic(self, semantic: str) -> Optional[MetadataClassProperty]:
        return self._properties_by_semantic.get(semantic)

    def __repr__(self) -> str:
        return f"MetadataClass(id={self._id!r}, properties={list(self._properties)!r})"
