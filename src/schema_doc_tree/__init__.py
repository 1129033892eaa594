"""Render-agnostic documentation trees for JSON Schema documents."""

from .document_tree import (
    CyclicSchemaError,
    DocumentNode,
    DocumentTreeError,
    MetadataEntry,
    NodeKind,
    SchemaShapeError,
    SchemaTreeBuilder,
    Visibility,
    build_document_tree,
    heading_level,
)

__all__ = [
    "CyclicSchemaError",
    "DocumentNode",
    "DocumentTreeError",
    "MetadataEntry",
    "NodeKind",
    "SchemaShapeError",
    "SchemaTreeBuilder",
    "Visibility",
    "build_document_tree",
    "heading_level",
]
