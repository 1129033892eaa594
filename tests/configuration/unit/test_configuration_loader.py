"""Configuration loader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml
from schema_doc_tree.configuration import OutputFormat
from schema_doc_tree.configuration.loader import ConfigurationError, load_configuration


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def _schema_text() -> str:
    return json.dumps({"type": "object", "properties": {"name": {"type": "string"}}})


def test_loads_yaml_configuration_with_defaults(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "config.yaml",
        """
schema:
  inline: |
    {
      "type": "object",
      "properties": {"name": {"type": "string"}}
    }
""",
    )

    configuration = load_configuration(config_path)

    assert configuration.path == config_path
    assert configuration.schema.schema_format == "json"
    assert configuration.schema.text.startswith("{")
    assert configuration.schema.source_path is None
    assert configuration.output.output_format is OutputFormat.MARKDOWN
    assert configuration.output.title is None
    assert configuration.output.include_root_metadata is False
    assert configuration.output.output_path is None
    assert configuration.tree.detect_cycles is True


def test_loads_configuration_with_schema_path_and_output(tmp_path: Path) -> None:
    schema_path = _write_file(tmp_path / "schema.yml", "type: object\n")
    config_path = _write_file(
        tmp_path / "config.yaml",
        yaml.safe_dump(
            {
                "schema": {"path": schema_path.name},
                "output": {
                    "format": "Outline",
                    "title": "  Portal reference ",
                    "include_root_metadata": True,
                    "path": "out/reference.txt",
                },
                "tree": {"detect_cycles": False},
            }
        ),
    )

    configuration = load_configuration(config_path)

    assert configuration.schema.schema_format == "yaml"
    assert configuration.schema.source_path == schema_path.resolve()
    assert configuration.output.output_format is OutputFormat.OUTLINE
    assert configuration.output.title == "Portal reference"
    assert configuration.output.include_root_metadata is True
    assert configuration.output.output_path == (tmp_path / "out" / "reference.txt").resolve()
    assert configuration.tree.detect_cycles is False


def test_explicit_schema_format_applies_to_inline_text(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "config.yaml",
        yaml.safe_dump({"schema": {"inline": "type: object\n", "format": "yaml"}}),
    )

    configuration = load_configuration(config_path)

    assert configuration.schema.schema_format == "yaml"


def test_missing_configuration_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Configuration file not found"):
        load_configuration(tmp_path / "missing.yaml")


def test_non_mapping_root_raises(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "- one\n- two\n")

    with pytest.raises(ConfigurationError, match="root must be a mapping"):
        load_configuration(config_path)


def test_empty_configuration_requires_schema_section(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "")

    with pytest.raises(ConfigurationError, match="'schema' is required"):
        load_configuration(config_path)


@pytest.mark.parametrize(
    ("schema_section", "message"),
    [
        ({}, "requires either inline or path"),
        ({"inline": "{}", "path": "schema.json"}, "must not set both"),
        ({"inline": "   "}, "cannot be empty"),
        ({"inline": 42}, "inline value must be a string"),
        ({"path": "missing.json"}, "Schema file not found"),
        ({"inline": "{}", "format": "xml"}, "schema.format must be one of"),
        ({"inline": "{broken"}, "Invalid json schema"),
        ({"inline": "[1, 2]"}, "must be a mapping"),
    ],
)
def test_errors_when_schema_definition_invalid(
    tmp_path: Path, schema_section: dict, message: str
) -> None:
    config_path = _write_file(tmp_path / "config.yaml", yaml.safe_dump({"schema": schema_section}))

    with pytest.raises(ConfigurationError, match=message):
        load_configuration(config_path)


@pytest.mark.parametrize(
    ("config", "message"),
    [
        ({"output": "markdown"}, "'output' must be a mapping"),
        ({"output": {"format": "html"}}, "output.format must be one of"),
        ({"output": {"format": "workbook"}}, "output.path is required"),
        ({"output": {"title": 3}}, "output.title must be a string"),
        ({"output": {"include_root_metadata": "yes"}}, "must be a boolean"),
        ({"tree": {"detect_cycles": 1}}, "tree.detect_cycles must be a boolean"),
    ],
)
def test_errors_when_output_or_tree_sections_invalid(
    tmp_path: Path, config: dict, message: str
) -> None:
    config_path = _write_file(
        tmp_path / "config.yaml", yaml.safe_dump({"schema": {"inline": _schema_text()}, **config})
    )

    with pytest.raises(ConfigurationError, match=message):
        load_configuration(config_path)
