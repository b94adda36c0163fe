"""Utilities for validating net pattern catalogs."""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from functools import lru_cache
from pathlib import Path
from typing import Any

import json

import yaml
from jsonschema import Draft202012Validator, ValidationError

from boxnet.catalog import NetPattern

PATTERN_CATALOG_SCHEMA_NAME = "net_patterns.yaml"

__all__ = [
    "PATTERN_CATALOG_SCHEMA_NAME",
    "SchemaValidationError",
    "load_schema",
    "load_payload",
    "load_pattern_catalog",
    "parse_pattern_catalog",
    "validate_pattern_catalog",
]


class SchemaValidationError(RuntimeError):
    """Raised when an instance fails schema validation."""

    def __init__(self, errors: Iterable[ValidationError | str]):
        self.errors = tuple(errors)
        message = "Schema validation failed:\n" + "\n".join(_format_error(e) for e in self.errors)
        super().__init__(message)


def _repository_root() -> Path:
    return Path(__file__).resolve().parents[2]


def _schema_dir() -> Path:
    return _repository_root() / "schemas"


@lru_cache(maxsize=4)
def load_schema(name: str = PATTERN_CATALOG_SCHEMA_NAME) -> Mapping[str, Any]:
    """Load and cache a schema definition by name."""

    schema_path = _schema_dir() / name
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema '{name}' not found at {schema_path}")

    with schema_path.open("r", encoding="utf-8") as handle:
        schema = yaml.safe_load(handle)

    if not isinstance(schema, Mapping):
        raise TypeError(f"Schema '{name}' must decode to a mapping, received {type(schema)!r}")

    return schema


def load_payload(path: Path) -> Any:
    """Load a JSON or YAML payload from disk."""

    suffix = path.suffix.lower()
    with path.open("r", encoding="utf-8") as handle:
        if suffix in {".yaml", ".yml"}:
            return yaml.safe_load(handle)
        if suffix == ".json":
            return json.load(handle)
    raise ValueError(f"Unsupported payload extension '{suffix}' for {path}")


def validate_pattern_catalog(
    instance: Any,
    *,
    schema_name: str = PATTERN_CATALOG_SCHEMA_NAME,
) -> None:
    """Validate *instance* against the net pattern catalog schema.

    Beyond the schema, pattern ids must be unique and every pattern's links
    must name distinct child faces.
    """

    schema = load_schema(schema_name)
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(instance), key=lambda exc: list(exc.path))
    if errors:
        raise SchemaValidationError(errors)

    problems: list[str] = []
    seen_ids: set[int] = set()
    for index, pattern in enumerate(instance["patterns"]):
        pattern_id = pattern["id"]
        if pattern_id in seen_ids:
            problems.append(f"[patterns / {index}] duplicate pattern id {pattern_id}")
        seen_ids.add(pattern_id)
        children = [link["to"] for link in pattern["structure"]]
        if len(set(children)) != len(children) or 0 in children:
            problems.append(
                f"[patterns / {index}] pattern {pattern_id} attaches a face more than once"
            )
    if problems:
        raise SchemaValidationError(problems)


def parse_pattern_catalog(instance: Any) -> tuple[NetPattern, ...]:
    """Validate *instance* and convert its entries to :class:`NetPattern`."""

    validate_pattern_catalog(instance)
    return tuple(NetPattern.from_mapping(entry) for entry in instance["patterns"])


def load_pattern_catalog(path: Path) -> tuple[NetPattern, ...]:
    """Load and validate a pattern catalog from a JSON or YAML file."""

    instance = load_payload(path)
    if not isinstance(instance, Mapping):
        raise TypeError("Pattern catalog payload must be a mapping.")
    return parse_pattern_catalog(instance)


def _format_error(error: ValidationError | str) -> str:
    if isinstance(error, str):
        return error
    location = " / ".join(str(component) for component in error.absolute_path)
    prefix = f"[{location}] " if location else ""
    return f"{prefix}{error.message}"
