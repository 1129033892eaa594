"""Schema to document tree construction service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .metadata_extraction import extract_metadata
from .schema_classification import classify_schema, is_required, resolve_visibility
from .tree_models import DocumentNode, NodeKind

_LOGGER = logging.getLogger(__name__)

ARRAY_ITEM_SUFFIX = "[]"


class DocumentTreeError(Exception):
    """Base class for document tree construction failures."""


class SchemaShapeError(DocumentTreeError, TypeError):
    """Raised when a schema fragment has the wrong type for its position."""


class CyclicSchemaError(DocumentTreeError):
    """Raised when a schema refers back to one of its own ancestors."""


def build_document_tree(
    schema: Mapping[str, Any],
    path: str = "",
    depth: int = 0,
    *,
    detect_cycles: bool = False,
) -> DocumentNode:
    """Build the document tree for ``schema``.

    Args:
      schema: JSON Schema fragment. ``$ref`` and composition keywords are not resolved.
      path: Accumulated path of ``schema``; empty for the root.
      depth: Accumulated nesting depth of ``schema``; zero for the root.
      detect_cycles: Fail with ``CyclicSchemaError`` instead of recursing forever
        when a mapping appears twice on one branch.

    Returns:
      The fully populated root ``DocumentNode``.

    Raises:
      SchemaShapeError: If a schema fragment, ``properties``, ``items`` or
        ``description`` has the wrong type.
      CyclicSchemaError: If ``detect_cycles`` is set and the schema is cyclic.
    """
    return SchemaTreeBuilder(detect_cycles=detect_cycles).build(schema, path, depth)


@dataclass(frozen=True)
class SchemaTreeBuilder:
    """Stateless recursive builder turning schemas into ``DocumentNode`` trees."""

    detect_cycles: bool = False

    def build(self, schema: Mapping[str, Any], path: str = "", depth: int = 0) -> DocumentNode:
        if depth < 0:
            raise ValueError(f"Depth must not be negative, got {depth}.")
        name = _name_from_path(path)
        tree = self._build_node(
            schema, path=path, depth=depth, name=name, required=False, ancestors=()
        )
        _LOGGER.debug(
            "Built document tree at path %r with %d nodes", path, sum(1 for _ in tree.walk())
        )
        return tree

    # pylint: disable=too-many-arguments
    def _build_node(
        self,
        schema: Any,
        *,
        path: str,
        depth: int,
        name: str,
        required: bool,
        ancestors: tuple[int, ...],
    ) -> DocumentNode:
        if not isinstance(schema, Mapping):
            raise SchemaShapeError(
                f"Schema at {_describe(path)} must be a mapping, got {type(schema).__name__}."
            )
        if self.detect_cycles:
            if id(schema) in ancestors:
                raise CyclicSchemaError(f"Schema at {_describe(path)} refers back to an ancestor.")
            ancestors = ancestors + (id(schema),)

        kind = classify_schema(schema)
        if kind is NodeKind.ARRAY:
            children = self._array_children(schema, path, depth, ancestors)
        elif kind is NodeKind.OBJECT:
            children = self._object_children(schema, path, depth, ancestors)
        else:
            children = ()

        return DocumentNode(
            path=path,
            depth=depth,
            kind=kind,
            name=name,
            required=required,
            visibility=resolve_visibility(schema),
            metadata=extract_metadata(schema),
            description=_description(schema, path),
            children=children,
        )

    def _array_children(
        self, schema: Mapping[str, Any], path: str, depth: int, ancestors: tuple[int, ...]
    ) -> tuple[DocumentNode, ...]:
        items = schema.get("items")
        if items is None:
            return ()
        if not isinstance(items, Mapping):
            raise SchemaShapeError(
                f"'items' at {_describe(path)} must be a mapping, got {type(items).__name__}."
            )
        item_path = f"{path}{ARRAY_ITEM_SUFFIX}" if path else ARRAY_ITEM_SUFFIX
        child = self._build_node(
            items,
            path=item_path,
            depth=depth + 1,
            name=ARRAY_ITEM_SUFFIX,
            required=False,
            ancestors=ancestors,
        )
        return (child,)

    def _object_children(
        self, schema: Mapping[str, Any], path: str, depth: int, ancestors: tuple[int, ...]
    ) -> tuple[DocumentNode, ...]:
        properties = schema.get("properties")
        if properties is None:
            return ()
        if not isinstance(properties, Mapping):
            raise SchemaShapeError(
                f"'properties' at {_describe(path)} must be a mapping, "
                f"got {type(properties).__name__}."
            )
        required_value = schema.get("required")
        children: list[DocumentNode] = []
        for raw_name, property_schema in properties.items():
            property_name = str(raw_name)
            child_path = f"{path}.{property_name}" if path else property_name
            children.append(
                self._build_node(
                    property_schema,
                    path=child_path,
                    depth=depth + 1,
                    name=property_name,
                    required=is_required(property_name, required_value),
                    ancestors=ancestors,
                )
            )
        return tuple(children)


def _description(schema: Mapping[str, Any], path: str) -> str | None:
    description = schema.get("description")
    if description is None or isinstance(description, str):
        return description
    raise SchemaShapeError(
        f"'description' at {_describe(path)} must be a string, got {type(description).__name__}."
    )


def _name_from_path(path: str) -> str:
    if path.endswith(ARRAY_ITEM_SUFFIX):
        return ARRAY_ITEM_SUFFIX
    return path.rsplit(".", 1)[-1]


def _describe(path: str) -> str:
    return f"'{path}'" if path else "the schema root"
