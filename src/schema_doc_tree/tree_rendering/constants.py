"""Constants shared by the document tree renderers."""

ROOT_LABEL = "(root)"
FIELDS_SHEET_NAME = "Fields"
FIELD_COLUMNS = (
    "path",
    "depth",
    "kind",
    "required",
    "visibility",
    "description",
    "constraints",
)
