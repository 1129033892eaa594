"""Render execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from schema_doc_tree.configuration.runtime_settings import OutputSettings, TreeSettings
from schema_doc_tree.schema_management.schema_models import SchemaConfig


@dataclass(frozen=True)
class RenderRequest:  # pylint: disable=too-many-instance-attributes
    """Input contract for rendering one schema reference.

    Exactly one of ``config_path`` and ``schema_path`` must be set. Every other
    field overrides the configured value when not ``None``.
    """

    config_path: str | None = None
    schema_path: str | None = None
    output_format: str | None = None
    output_path: str | None = None
    title: str | None = None
    include_root_metadata: bool | None = None
    detect_cycles: bool | None = None


@dataclass(frozen=True)
class RenderSettings:
    """Resolved settings for one render."""

    schema: SchemaConfig
    output: OutputSettings
    tree: TreeSettings


@dataclass(frozen=True)
class RenderOutcome:
    """Output contract for one completed render."""

    node_count: int
    content: str | None
    output_path: Path | None
