"""JSON export of a document tree."""

from __future__ import annotations

import json
from typing import Any

from schema_doc_tree.document_tree import DocumentNode


def document_tree_to_dict(node: DocumentNode) -> dict[str, Any]:
    """Convert a document tree into plain JSON-compatible data."""
    return {
        "path": node.path,
        "name": node.name,
        "depth": node.depth,
        "kind": node.kind.value,
        "required": node.required,
        "visibility": node.visibility.value if node.visibility is not None else None,
        "description": node.description,
        "metadata": [
            {"keyword": entry.keyword, "label": entry.label, "value": entry.value}
            for entry in node.metadata
        ],
        "children": [document_tree_to_dict(child) for child in node.children],
    }


def render_json(tree: DocumentNode, *, indent: int = 2) -> str:
    text = json.dumps(document_tree_to_dict(tree), indent=indent, ensure_ascii=False, default=str)
    return text + "\n"
