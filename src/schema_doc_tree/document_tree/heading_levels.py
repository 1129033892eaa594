"""Heading level mapping for presentation consumers."""

from __future__ import annotations

_MIN_LEVEL = 2
_MAX_LEVEL = 6


def heading_level(depth: int) -> int:
    """Map a node depth to a heading level between 2 and 6.

    Depths 0 and 1 share level 2; deeper nodes saturate at level 6.
    """
    if depth < 0:
        raise ValueError(f"Depth must not be negative, got {depth}.")
    return min(max(depth + 1, _MIN_LEVEL), _MAX_LEVEL)
