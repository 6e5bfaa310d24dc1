"""
Environment-driven settings for schema construction.

Environment variables:
    METASCHEMA_STRICT_SEMANTICS         : raise DuplicateSemanticError when two
                                          properties of a class share a semantic.
    METASCHEMA_WARN_DUPLICATE_SEMANTICS : log duplicate semantics at WARNING
                                          instead of DEBUG.

Both default to off, which keeps duplicate semantics permissive
(last property wins the semantic index).
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool = False) -> bool:
    raw = (os.getenv(name) or "").strip().lower()
    if not raw:
        return default
    return raw in _TRUTHY


@dataclass(frozen=True)
class SchemaSettings:
    strict_semantics: bool = False
    warn_duplicate_semantics: bool = False

    @classmethod
    def from_env(cls) -> "SchemaSettings":
        return cls(
            strict_semantics=_env_flag("METASCHEMA_STRICT_SEMANTICS"),
            warn_duplicate_semantics=_env_flag("METASCHEMA_WARN_DUPLICATE_SEMANTICS"),
        )


def load_settings(override: Optional[SchemaSettings] = None) -> SchemaSettings:
    # Read per call so tests can monkeypatch the environment.
    if override is not None:
        return override
    return SchemaSettings.from_env()
