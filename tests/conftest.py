import pytest

from metaschema.core.metrics import reset_metrics
from metaschema.schema.enum_model import build_enums


@pytest.fixture(autouse=True)
def _force_test_env(monkeypatch):
    # Duplicate semantics stay permissive unless a test opts in
    monkeypatch.delenv("METASCHEMA_STRICT_SEMANTICS", raising=False)
    monkeypatch.delenv("METASCHEMA_WARN_DUPLICATE_SEMANTICS", raising=False)
    reset_metrics()


@pytest.fixture()
def enums():
    return build_enums(
        {
            "wallMaterial": {
                "valueType": "UINT8",
                "values": [
                    {"value": 0, "name": "BRICK"},
                    {"value": 1, "name": "CONCRETE"},
                    {"value": 2, "name": "WOOD"},
                ],
            },
            "condition": {
                "values": [
                    {"value": 0, "name": "GOOD"},
                    {"value": 1, "name": "POOR"},
                ],
            },
        }
    )


@pytest.fixture()
def wall_definition():
    return {
        "name": "Wall",
        "description": "A vertical building element",
        "properties": {
            "height": {"type": "FLOAT32", "semantic": "HEIGHT"},
            "color": {"type": "STRING"},
        },
    }
