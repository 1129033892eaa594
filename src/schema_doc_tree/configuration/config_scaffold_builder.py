"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "schema-doc-tree.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for schema-doc-tree.
# Replace every <REQUIRED> placeholder before running render.
# Remove <OPTIONAL> entries you do not need; defaults are noted beside them.

schema:
  # Provide either an inline schema text or a schema file path, not both.
  path: "<REQUIRED>"
  # inline: "<OPTIONAL>"
  # json or yaml; inferred from the file suffix when omitted.
  # format: "<OPTIONAL>"

output:
  # markdown (default), outline, json or workbook.
  format: "markdown"
  # title: "<OPTIONAL>"
  # Show the root object's description and keywords (default false).
  include_root_metadata: false
  # Destination file; printed to stdout when omitted. Required for workbook.
  # path: "<OPTIONAL>"

tree:
  # Fail fast on self-referencing schemas, e.g. YAML anchors (default true).
  detect_cycles: true
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
