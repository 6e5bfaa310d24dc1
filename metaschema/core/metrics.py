from __future__ import annotations

from collections import Counter
from typing import Dict

from prometheus_client import Counter as PromCounter

_BUILDS = Counter()

_PROM_CLASSES = PromCounter(
    "metaschema_classes_built_total",
    "Total metadata classes constructed",
)

_PROM_PROPERTIES = PromCounter(
    "metaschema_properties_built_total",
    "Total metadata class properties constructed",
)

_PROM_DUPLICATE_SEMANTICS = PromCounter(
    "metaschema_duplicate_semantics_total",
    "Semantic index slots overwritten by a later property",
)


def reset_metrics() -> None:
    """
    Test helper: clears in-process counters to avoid cross-test leakage.
    Prometheus counters are monotonic and are left alone.
    """
    _BUILDS.clear()


def inc_class_built(property_count: int) -> None:
    _BUILDS["classes_built"] += 1
    _BUILDS["properties_built"] += int(property_count)
    _PROM_CLASSES.inc()
    _PROM_PROPERTIES.inc(int(property_count))


def inc_duplicate_semantic() -> None:
    _BUILDS["duplicate_semantics"] += 1
    _PROM_DUPLICATE_SEMANTICS.inc()


def snapshot() -> Dict[str, int]:
    return {
        "classes_built": int(_BUILDS.get("classes_built", 0)),
        "properties_built": int(_BUILDS.get("properties_built", 0)),
        "duplicate_semantics": int(_BUILDS.get("duplicate_semantics", 0)),
    }
