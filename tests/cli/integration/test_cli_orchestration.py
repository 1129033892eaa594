"""CLI orchestration integration tests."""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from click.testing import CliRunner
from openpyxl import load_workbook
from schema_doc_tree.cli import cli, main
from schema_doc_tree.tree_rendering import FIELDS_SHEET_NAME


def _sample_schema_path() -> Path:
    return Path(__file__).resolve().parents[3] / "samples" / "app-config-schema.json"


def test_render_markdown_for_sample_schema_prints_to_stdout() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["render", "--schema", str(_sample_schema_path())])

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert "## `app` _(required)_" in lines
    assert "### `app.baseUrl` _(required, frontend)_" in lines
    assert "### `backend.secret` _(required, secret)_" in lines
    assert "#### `backend.listen.port`" in lines
    assert "#### `organization.teams[]`" in lines
    assert "##### `organization.teams[].name` _(required)_" in lines
    assert "| Minimum | 0 |" in lines
    assert '| Allowed values | ["core", "platform", "product"] |' in lines
    assert "Configuration for the developer portal." not in result.output


def test_render_outline_for_sample_schema() -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli, ["render", "--schema", str(_sample_schema_path()), "--format", "outline"]
    )

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0] == "(root) [object] - Configuration for the developer portal."
    assert "        organization.teams[].level [scalar]" in lines


def test_render_json_to_output_file(tmp_path: Path) -> None:
    runner = CliRunner()
    output_path = tmp_path / "tree.json"

    result = runner.invoke(
        cli,
        [
            "render",
            "--schema",
            str(_sample_schema_path()),
            "--format",
            "json",
            "--output",
            str(output_path),
        ],
    )

    assert result.exit_code == 0, result.output
    assert result.output.strip() == str(output_path.resolve())
    tree = json.loads(output_path.read_text(encoding="utf-8"))
    assert [child["path"] for child in tree["children"]] == ["app", "backend", "organization"]
    assert [child["required"] for child in tree["children"]] == [True, True, False]


def test_render_workbook_from_generated_config(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = tmp_path / "schema-doc-tree.yaml"

    generated = runner.invoke(cli, ["generate-config", "--output", str(config_path)])
    assert generated.exit_code == 0, generated.output
    config = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    config["schema"]["path"] = str(_sample_schema_path())
    config["output"].update({"format": "workbook", "path": "reference/fields.xlsx"})
    config_path.write_text(yaml.safe_dump(config), encoding="utf-8")

    result = runner.invoke(cli, ["render", "--config", str(config_path)])

    assert result.exit_code == 0, result.output
    workbook_path = (tmp_path / "reference" / "fields.xlsx").resolve()
    assert result.output.strip() == str(workbook_path)
    sheet = load_workbook(workbook_path)[FIELDS_SHEET_NAME]
    paths = [row[0] for row in sheet.iter_rows(min_row=2, values_only=True)]
    assert paths[:3] == ["(root)", "app", "app.title"]
    assert "organization.teams[].level" in paths


def test_generate_config_refuses_to_overwrite(tmp_path: Path, capsys) -> None:
    config_path = tmp_path / "schema-doc-tree.yaml"
    config_path.write_text("existing", encoding="utf-8")

    exit_code = main(["generate-config", "--output", str(config_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "already exists" in captured.err
    assert config_path.read_text(encoding="utf-8") == "existing"


def test_render_with_title_and_root_metadata(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli,
        [
            "render",
            "--schema",
            str(_sample_schema_path()),
            "--title",
            "Portal configuration",
            "--include-root-metadata",
        ],
    )

    assert result.exit_code == 0, result.output
    assert result.output.startswith(
        "# Portal configuration\n\nConfiguration for the developer portal.\n"
    )
