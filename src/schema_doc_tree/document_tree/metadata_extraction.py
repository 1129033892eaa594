"""Metadata extraction for documented schema nodes."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .tree_models import FrozenMapping, MetadataEntry

METADATA_FIELDS: tuple[tuple[str, str], ...] = (
    ("type", "Type"),
    ("enum", "Allowed values"),
    ("format", "Format"),
    ("pattern", "Pattern"),
    ("minimum", "Minimum"),
    ("maximum", "Maximum"),
    ("exclusiveMinimum", "Exclusive minimum"),
    ("exclusiveMaximum", "Exclusive maximum"),
    ("multipleOf", "Multiple of"),
    ("maxItems", "Maximum number of items"),
    ("minItems", "Minimum number of items"),
    ("maxProperties", "Maximum number of properties"),
    ("minProperties", "Minimum number of properties"),
    ("maxLength", "Maximum length"),
    ("minLength", "Minimum length"),
    ("uniqueItems", "Items must be unique"),
)


def extract_metadata(schema: Mapping[str, Any]) -> tuple[MetadataEntry, ...]:
    """Return metadata entries for every known keyword present on ``schema``.

    Presence gates inclusion, so ``0`` and ``False`` are kept. A JSON ``null``
    counts as absent.
    """
    entries: list[MetadataEntry] = []
    for keyword, label in METADATA_FIELDS:
        value = schema.get(keyword)
        if value is None:
            continue
        entries.append(MetadataEntry(keyword=keyword, label=label, value=_freeze(value)))
    return tuple(entries)


def _freeze(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    if isinstance(value, Mapping):
        return FrozenMapping((key, _freeze(item)) for key, item in value.items())
    return value
