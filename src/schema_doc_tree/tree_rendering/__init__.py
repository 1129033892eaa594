"""Document tree rendering exports."""

from .constants import FIELD_COLUMNS, FIELDS_SHEET_NAME, ROOT_LABEL
from .text_rendering import format_metadata_value, node_badges, render_markdown, render_outline
from .tree_serialization import document_tree_to_dict, render_json
from .workbook_writer import write_field_workbook

__all__ = [
    "FIELD_COLUMNS",
    "FIELDS_SHEET_NAME",
    "ROOT_LABEL",
    "format_metadata_value",
    "node_badges",
    "render_markdown",
    "render_outline",
    "document_tree_to_dict",
    "render_json",
    "write_field_workbook",
]
