"""Schema node classification and annotation helpers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .tree_models import NodeKind, Visibility

_VISIBILITY_BY_VALUE = {member.value: member for member in Visibility}


def classify_schema(schema: Mapping[str, Any]) -> NodeKind:
    """Return the node kind for a schema fragment.

    A missing ``type`` key is treated as an object. Any other value, including
    an explicit ``null`` and lists of type names, is a scalar.
    """
    if "type" not in schema:
        return NodeKind.OBJECT
    schema_type = schema["type"]
    if schema_type == "array":
        return NodeKind.ARRAY
    if schema_type == "object":
        return NodeKind.OBJECT
    return NodeKind.SCALAR


def is_required(name: str, required: Any) -> bool:
    """Resolve whether ``name`` is required by its parent's ``required`` value."""
    if required is True:
        return True
    if isinstance(required, (list, tuple)):
        return name in required
    return False


def resolve_visibility(schema: Mapping[str, Any]) -> Visibility | None:
    value = schema.get("visibility")
    if not isinstance(value, str):
        return None
    return _VISIBILITY_BY_VALUE.get(value)
