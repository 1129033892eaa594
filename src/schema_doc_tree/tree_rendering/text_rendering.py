"""Markdown and plain-text renderings of a document tree."""

from __future__ import annotations

import json
from typing import Any

from schema_doc_tree.document_tree import DocumentNode, NodeKind, heading_level

from .constants import ROOT_LABEL


def format_metadata_value(value: Any) -> str:
    """Render a metadata value as text; strings verbatim, everything else as JSON."""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False, default=str)


def node_badges(node: DocumentNode) -> list[str]:
    badges = []
    if node.required:
        badges.append("required")
    if node.visibility is not None:
        badges.append(node.visibility.value)
    return badges


def render_markdown(
    tree: DocumentNode, *, title: str | None = None, include_root_metadata: bool = False
) -> str:
    """Render a document tree as a Markdown reference page.

    The tree root gets no heading of its own. A root object only shows its
    description and keyword table when ``include_root_metadata`` is set.
    """
    lines: list[str] = []
    if title:
        lines.extend([f"# {title}", ""])

    hide_root_details = tree.kind is NodeKind.OBJECT and tree.depth == 0
    if include_root_metadata or not hide_root_details:
        _write_details(lines, tree)
    _write_children(lines, tree, show_section_label=not hide_root_details)
    return "\n".join(lines).rstrip() + "\n"


def _write_node(lines: list[str], node: DocumentNode) -> None:
    heading = f"{'#' * heading_level(node.depth)} `{node.path}`"
    badges = node_badges(node)
    if badges:
        heading += f" _({', '.join(badges)})_"
    lines.extend([heading, ""])
    _write_details(lines, node)
    _write_children(lines, node, show_section_label=True)


def _write_details(lines: list[str], node: DocumentNode) -> None:
    if node.description:
        lines.extend([node.description, ""])
    if node.metadata:
        lines.append("| Keyword | Value |")
        lines.append("| --- | --- |")
        for entry in node.metadata:
            value = _escape_cell(format_metadata_value(entry.value))
            lines.append(f"| {entry.label} | {value} |")
        lines.append("")


def _write_children(lines: list[str], node: DocumentNode, *, show_section_label: bool) -> None:
    if not node.children:
        return
    if show_section_label:
        label = "Items" if node.kind is NodeKind.ARRAY else "Properties"
        lines.extend([f"**{label}**", ""])
    for child in node.children:
        _write_node(lines, child)


def _escape_cell(text: str) -> str:
    return text.replace("|", "\\|").replace("\n", " ")


def render_outline(tree: DocumentNode, *, indent: str = "  ") -> str:
    """Render a document tree as an indented plain-text outline."""
    lines = []
    for node in tree.walk():
        label = node.path or ROOT_LABEL
        line = f"{indent * (node.depth - tree.depth)}{label} [{node.kind.value}]"
        badges = node_badges(node)
        if badges:
            line += f" ({', '.join(badges)})"
        if node.description:
            line += f" - {node.description.splitlines()[0]}"
        lines.append(line)
    return "\n".join(lines) + "\n"
