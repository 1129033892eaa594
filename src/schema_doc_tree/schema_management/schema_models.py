"""Schema management entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class SchemaConfig:
    """Normalized schema source settings."""

    schema_format: str
    text: str
    source_path: Path | None


@dataclass(frozen=True)
class SchemaDocument:
    """Parsed schema definition."""

    schema_format: str
    root: Mapping[str, Any]
