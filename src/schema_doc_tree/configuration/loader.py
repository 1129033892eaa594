"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from schema_doc_tree.schema_management.schema_loading import (
    SCHEMA_FORMATS,
    SchemaError,
    infer_schema_format,
    load_schema_document,
    schema_config_from_path,
)
from schema_doc_tree.schema_management.schema_models import SchemaConfig

from .runtime_settings import Configuration, OutputFormat, OutputSettings, TreeSettings


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    schema = _parse_schema_section(parsed.get("schema"), path.parent)
    try:
        load_schema_document(schema)
    except SchemaError as exc:
        raise ConfigurationError(str(exc)) from exc

    output = _parse_output_section(parsed.get("output"), path.parent)
    tree = _parse_tree_section(parsed.get("tree"))

    return Configuration(path=path, schema=schema, output=output, tree=tree)


def _parse_schema_section(value: Any, base_path: Path) -> SchemaConfig:
    section = _require_mapping(value, "schema")
    inline = section.get("inline")
    path_value = section.get("path")
    if inline and path_value:
        raise ConfigurationError("Schema definition must not set both inline and path.")

    schema_format = _optional_string(section.get("format"), "schema.format")
    if schema_format is not None:
        schema_format = schema_format.lower()
        if schema_format not in SCHEMA_FORMATS:
            raise ConfigurationError(
                f"schema.format must be one of {', '.join(SCHEMA_FORMATS)}, got '{schema_format}'."
            )

    if inline:
        if not isinstance(inline, str):
            raise ConfigurationError("Schema inline value must be a string.")
        if not inline.strip():
            raise ConfigurationError("Schema text cannot be empty.")
        return SchemaConfig(schema_format=schema_format or "json", text=inline, source_path=None)
    if path_value:
        if not isinstance(path_value, str):
            raise ConfigurationError("Schema path must be a string.")
        schema_path = _resolve_path(base_path, path_value)
        try:
            config = schema_config_from_path(
                schema_path, schema_format or infer_schema_format(schema_path)
            )
        except SchemaError as exc:
            raise ConfigurationError(str(exc)) from exc
        if not config.text.strip():
            raise ConfigurationError("Schema text cannot be empty.")
        return config
    raise ConfigurationError("Schema definition requires either inline or path.")


def _parse_output_section(value: Any, base_path: Path) -> OutputSettings:
    section = _optional_mapping(value, "output")
    format_value = _optional_string(section.get("format"), "output.format") or "markdown"
    try:
        output_format = OutputFormat(format_value.lower())
    except ValueError as exc:
        choices = ", ".join(member.value for member in OutputFormat)
        raise ConfigurationError(
            f"output.format must be one of {choices}, got '{format_value}'."
        ) from exc

    title = _optional_string(section.get("title"), "output.title")
    include_root_metadata = _optional_bool(
        section.get("include_root_metadata"), "output.include_root_metadata", default=False
    )
    raw_output_path = _optional_string(section.get("path"), "output.path")
    output_path = _resolve_path(base_path, raw_output_path) if raw_output_path else None
    if output_format is OutputFormat.WORKBOOK and output_path is None:
        raise ConfigurationError("output.path is required for the workbook format.")

    return OutputSettings(
        output_format=output_format,
        title=title,
        include_root_metadata=include_root_metadata,
        output_path=output_path,
    )


def _parse_tree_section(value: Any) -> TreeSettings:
    section = _optional_mapping(value, "tree")
    detect_cycles = _optional_bool(section.get("detect_cycles"), "tree.detect_cycles", default=True)
    return TreeSettings(detect_cycles=detect_cycles)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _optional_bool(value: Any, field_name: str, *, default: bool) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value
