"""Heading level mapping tests."""

from __future__ import annotations

import pytest
from schema_doc_tree.document_tree import heading_level


def test_heading_levels_saturate() -> None:
    assert [heading_level(depth) for depth in (0, 1, 2, 3, 4, 7)] == [2, 2, 3, 4, 5, 6]
    assert heading_level(5) == 6
    assert heading_level(100) == 6


def test_negative_depth_is_rejected() -> None:
    with pytest.raises(ValueError):
        heading_level(-1)
