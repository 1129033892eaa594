"""Document tree exports."""

from .heading_levels import heading_level
from .metadata_extraction import METADATA_FIELDS, extract_metadata
from .schema_classification import classify_schema, is_required, resolve_visibility
from .tree_builder import (
    CyclicSchemaError,
    DocumentTreeError,
    SchemaShapeError,
    SchemaTreeBuilder,
    build_document_tree,
)
from .tree_models import DocumentNode, FrozenMapping, MetadataEntry, NodeKind, Visibility

__all__ = [
    "DocumentNode",
    "FrozenMapping",
    "MetadataEntry",
    "NodeKind",
    "Visibility",
    "METADATA_FIELDS",
    "extract_metadata",
    "classify_schema",
    "is_required",
    "resolve_visibility",
    "heading_level",
    "DocumentTreeError",
    "SchemaShapeError",
    "CyclicSchemaError",
    "SchemaTreeBuilder",
    "build_document_tree",
]
