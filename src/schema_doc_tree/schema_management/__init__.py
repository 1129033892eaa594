"""Schema management exports."""

from .schema_loading import (
    SCHEMA_FORMATS,
    SchemaError,
    infer_schema_format,
    load_schema_document,
    schema_config_from_path,
)
from .schema_models import SchemaConfig, SchemaDocument

__all__ = [
    "SCHEMA_FORMATS",
    "SchemaConfig",
    "SchemaDocument",
    "SchemaError",
    "infer_schema_format",
    "load_schema_document",
    "schema_config_from_path",
]
