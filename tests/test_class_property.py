import pytest

from metaschema.core.errors import (
    EnumResolutionError,
    InvalidArgumentError,
    PropertyDefinitionError,
)
from metaschema.schema.class_property import MetadataClassProperty
from metaschema.schema.definitions import PropertyDefinition
from metaschema.schema.types import MetadataType


def test_scalar_property_defaults():
    prop = MetadataClassProperty(id="height", property_definition={"type": "FLOAT32"})

    assert prop.id == "height"
    assert prop.type is MetadataType.FLOAT32
    assert prop.value_type is MetadataType.FLOAT32
    assert prop.component_type is None
    assert prop.enum_type is None
    assert prop.normalized is False
    assert prop.optional is False
    assert prop.semantic is None
    assert prop.name is None
    assert prop.default is None


def test_full_property_definition():
    prop = MetadataClassProperty(
        id="intensity",
        property_definition={
            "name": "Intensity",
            "description": "Return intensity",
            "type": "UINT8",
            "normalized": True,
            "min": 0,
            "max": 255,
            "default": 10,
            "optional": True,
            "semantic": "INTENSITY",
        },
    )
    assert prop.name == "Intensity"
    assert prop.description == "Return intensity"
    assert prop.normalized is True
    assert (prop.min, prop.max, prop.default) == (0, 255, 10)
    assert prop.optional is True
    assert prop.semantic == "INTENSITY"


def test_array_property_value_type_is_component_type():
    prop = MetadataClassProperty(
        id="coords",
        property_definition={"type": "ARRAY", "componentType": "FLOAT64", "componentCount": 3},
    )
    assert prop.type is MetadataType.ARRAY
    assert prop.component_type is MetadataType.FLOAT64
    assert prop.component_count == 3
    assert prop.value_type is MetadataType.FLOAT64


def test_enum_property_uses_enum_value_type(enums):
    prop = MetadataClassProperty(
        id="material",
        property_definition={"type": "ENUM", "enumType": "wallMaterial"},
        enums=enums,
    )
    assert prop.enum_type is enums["wallMaterial"]
    assert prop.value_type is MetadataType.UINT8


def test_array_of_enum_resolves_enum(enums):
    prop = MetadataClassProperty(
        id="history",
        property_definition={"type": "ARRAY", "componentType": "ENUM", "enumType": "condition"},
        enums=enums,
    )
    assert prop.enum_type is enums["condition"]
    assert prop.value_type is MetadataType.UINT16


def test_accepts_property_definition_model():
    definition = PropertyDefinition(type="STRING", semantic="NAME")
    prop = MetadataClassProperty(id="name", property_definition=definition)
    assert prop.type is MetadataType.STRING
    assert prop.semantic == "NAME"


def test_extras_and_default_are_copied():
    default = [1, 2]
    extras = {"k": ["v"]}
    definition = {"type": "ARRAY", "componentType": "INT32", "default": default, "extras": extras}
    prop = MetadataClassProperty(id="p", property_definition=definition)

    default.append(3)
    extras["k"].append("w")

    assert prop.default == [1, 2]
    assert prop.extras == {"k": ["v"]}


def test_property_is_read_only():
    prop = MetadataClassProperty(id="p", property_definition={"type": "STRING"})
    with pytest.raises(AttributeError):
        prop.semantic = "NAME"
    with pytest.raises(AttributeError):
        prop.anything = 1


# ---------------------------------------------------------------------------
# failures
# ---------------------------------------------------------------------------

def test_unknown_type_rejected():
    with pytest.raises(PropertyDefinitionError) as ei:
        MetadataClassProperty(id="p", property_definition={"type": "DECIMAL"})
    assert "DECIMAL" in str(ei.value)


def test_missing_type_rejected():
    with pytest.raises(PropertyDefinitionError):
        MetadataClassProperty(id="p", property_definition={"semantic": "NAME"})


def test_array_requires_component_type():
    with pytest.raises(PropertyDefinitionError):
        MetadataClassProperty(id="p", property_definition={"type": "ARRAY"})


def test_nested_array_rejected():
    with pytest.raises(PropertyDefinitionError):
        MetadataClassProperty(id="p", property_definition={"type": "ARRAY", "componentType": "ARRAY"})


def test_component_count_must_be_positive():
    with pytest.raises(PropertyDefinitionError):
        MetadataClassProperty(
            id="p",
            property_definition={"type": "ARRAY", "componentType": "UINT8", "componentCount": 0},
        )


def test_enum_requires_enum_type():
    with pytest.raises(PropertyDefinitionError) as ei:
        MetadataClassProperty(id="p", property_definition={"type": "ENUM"})
    assert not isinstance(ei.value, EnumResolutionError)


def test_unknown_enum_raises_resolution_error(enums):
    with pytest.raises(EnumResolutionError) as ei:
        MetadataClassProperty(
            id="p",
            property_definition={"type": "ENUM", "enumType": "nope"},
            enums=enums,
        )
    assert ei.value.enum_id == "nope"


def test_normalized_requires_integer_type():
    with pytest.raises(PropertyDefinitionError):
        MetadataClassProperty(id="p", property_definition={"type": "FLOAT32", "normalized": True})


@pytest.mark.parametrize("bad_id", ["", None])
def test_invalid_id(bad_id):
    with pytest.raises(InvalidArgumentError):
        MetadataClassProperty(id=bad_id, property_definition={"type": "STRING"})


def test_definition_must_be_an_object():
    with pytest.raises(InvalidArgumentError):
        MetadataClassProperty(id="p", property_definition="STRING")


def test_enums_must_be_a_mapping():
    with pytest.raises(InvalidArgumentError):
        MetadataClassProperty(id="p", property_definition={"type": "STRING"}, enums=["a"])
