"""Schema loading service."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path

import yaml

from .schema_models import SchemaConfig, SchemaDocument

_LOGGER = logging.getLogger(__name__)

SCHEMA_FORMATS = ("json", "yaml")
_YAML_SUFFIXES = (".yaml", ".yml")


class SchemaError(Exception):
    """Raised for schema reading or parsing failures."""


def infer_schema_format(path: Path | str) -> str:
    """Return ``yaml`` for YAML file suffixes and ``json`` otherwise."""
    return "yaml" if Path(path).suffix.lower() in _YAML_SUFFIXES else "json"


def schema_config_from_path(path: Path | str, schema_format: str | None = None) -> SchemaConfig:
    """Read a schema file into a ``SchemaConfig``."""
    schema_path = Path(path)
    if not schema_path.is_file():
        raise SchemaError(f"Schema file not found: {schema_path}")
    try:
        text = schema_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SchemaError(f"Failed to read schema file {schema_path}: {exc}") from exc
    return SchemaConfig(
        schema_format=schema_format or infer_schema_format(schema_path),
        text=text,
        source_path=schema_path.resolve(),
    )


def load_schema_document(config: SchemaConfig) -> SchemaDocument:
    """Parse schema text into a structured document."""
    if config.schema_format == "json":
        try:
            root = json.loads(config.text)
        except json.JSONDecodeError as exc:
            raise SchemaError(f"Invalid json schema: {exc}") from exc
    elif config.schema_format == "yaml":
        try:
            root = yaml.safe_load(config.text)
        except yaml.YAMLError as exc:
            raise SchemaError(f"Invalid yaml schema: {exc}") from exc
    else:
        raise SchemaError(f"Unsupported schema format: {config.schema_format}")

    if not isinstance(root, Mapping):
        raise SchemaError("Schema root must be a mapping.")

    _LOGGER.debug(
        "Loaded %s schema from %s", config.schema_format, config.source_path or "inline text"
    )
    return SchemaDocument(schema_format=config.schema_format, root=root)
