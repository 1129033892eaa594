"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from schema_doc_tree.schema_management.schema_models import SchemaConfig


class OutputFormat(str, Enum):
    """Supported document tree renderings."""

    MARKDOWN = "markdown"
    OUTLINE = "outline"
    JSON = "json"
    WORKBOOK = "workbook"


@dataclass(frozen=True)
class OutputSettings:
    """Rendering options for the produced reference document."""

    output_format: OutputFormat
    title: str | None
    include_root_metadata: bool
    output_path: Path | None


@dataclass(frozen=True)
class TreeSettings:
    """Document tree construction options."""

    detect_cycles: bool


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    schema: SchemaConfig
    output: OutputSettings
    tree: TreeSettings
