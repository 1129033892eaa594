"""Excel field reference generation service."""

from __future__ import annotations

from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from schema_doc_tree.document_tree import DocumentNode

from .constants import FIELD_COLUMNS, FIELDS_SHEET_NAME, ROOT_LABEL
from .text_rendering import format_metadata_value


def write_field_workbook(tree: DocumentNode, output_path: Path | str) -> Path:
    """Write one row per document tree node into an Excel workbook."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = FIELDS_SHEET_NAME

    for column_index, name in enumerate(FIELD_COLUMNS, start=1):
        header = sheet.cell(row=1, column=column_index, value=name)
        header.style = "Headline 4"
    sheet.freeze_panes = "A2"

    widths = [len(name) for name in FIELD_COLUMNS]
    for row_index, node in enumerate(tree.walk(), start=2):
        values = _row_values(node)
        for column_index, value in enumerate(values, start=1):
            sheet.cell(row=row_index, column=column_index, value=value)
            widths[column_index - 1] = max(widths[column_index - 1], len(str(value or "")))

    for column_index, width in enumerate(widths, start=1):
        sheet.column_dimensions[get_column_letter(column_index)].width = max(12, min(width + 4, 60))

    destination = Path(output_path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(destination)
    return destination.resolve()


def _row_values(node: DocumentNode) -> tuple[object, ...]:
    constraints = "; ".join(
        f"{entry.label}: {format_metadata_value(entry.value)}" for entry in node.metadata
    )
    return (
        node.path or ROOT_LABEL,
        node.depth,
        node.kind.value,
        node.required,
        node.visibility.value if node.visibility is not None else None,
        node.description,
        constraints or None,
    )
