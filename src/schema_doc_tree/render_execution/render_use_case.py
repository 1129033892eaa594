"""Render execution use-case service."""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

from schema_doc_tree.configuration import (
    ConfigurationError,
    OutputFormat,
    OutputSettings,
    TreeSettings,
    load_configuration,
)
from schema_doc_tree.document_tree import DocumentNode, DocumentTreeError, build_document_tree
from schema_doc_tree.schema_management import (
    SchemaError,
    load_schema_document,
    schema_config_from_path,
)
from schema_doc_tree.tree_rendering import (
    render_json,
    render_markdown,
    render_outline,
    write_field_workbook,
)

from .render_contracts import RenderOutcome, RenderRequest, RenderSettings

_LOGGER = logging.getLogger(__name__)

_TOO_DEEP_MESSAGE = (
    "Schema nesting is too deep or cyclic; enable cycle detection to locate a cycle."
)


class RenderExecutionError(Exception):
    """Raised when a render use case cannot be completed."""


def execute_schema_render(request: RenderRequest) -> RenderOutcome:
    """Load the schema, build its document tree and render it."""
    settings = resolve_render_settings(request)
    try:
        document = load_schema_document(settings.schema)
        tree = build_document_tree(document.root, detect_cycles=settings.tree.detect_cycles)
    except (SchemaError, DocumentTreeError) as exc:
        raise RenderExecutionError(str(exc)) from exc
    except RecursionError as exc:
        raise RenderExecutionError(_TOO_DEEP_MESSAGE) from exc

    node_count = sum(1 for _ in tree.walk())
    _LOGGER.info(
        "Rendering %d document nodes as %s", node_count, settings.output.output_format.value
    )

    output = settings.output
    if output.output_format is OutputFormat.WORKBOOK:
        if output.output_path is None:
            raise RenderExecutionError("An output path is required for the workbook format.")
        try:
            written = write_field_workbook(tree, output.output_path)
        except OSError as exc:
            raise RenderExecutionError(f"Failed to write workbook: {exc}") from exc
        return RenderOutcome(node_count=node_count, content=None, output_path=written)

    try:
        content = _render_text(tree, output)
    except RecursionError as exc:
        raise RenderExecutionError(_TOO_DEEP_MESSAGE) from exc
    if output.output_path is None:
        return RenderOutcome(node_count=node_count, content=content, output_path=None)

    try:
        output.output_path.parent.mkdir(parents=True, exist_ok=True)
        output.output_path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise RenderExecutionError(f"Failed to write output file: {exc}") from exc
    return RenderOutcome(
        node_count=node_count, content=content, output_path=output.output_path.resolve()
    )


def resolve_render_settings(request: RenderRequest) -> RenderSettings:
    """Merge configuration file values with request overrides."""
    if bool(request.config_path) == bool(request.schema_path):
        raise RenderExecutionError("Provide exactly one of a configuration file or a schema file.")

    if request.config_path:
        try:
            configuration = load_configuration(request.config_path)
        except ConfigurationError as exc:
            raise RenderExecutionError(str(exc)) from exc
        settings = RenderSettings(
            schema=configuration.schema, output=configuration.output, tree=configuration.tree
        )
    else:
        assert request.schema_path is not None
        try:
            schema = schema_config_from_path(request.schema_path)
        except SchemaError as exc:
            raise RenderExecutionError(str(exc)) from exc
        settings = RenderSettings(
            schema=schema,
            output=OutputSettings(
                output_format=OutputFormat.MARKDOWN,
                title=None,
                include_root_metadata=False,
                output_path=None,
            ),
            tree=TreeSettings(detect_cycles=True),
        )

    return replace(
        settings,
        output=_apply_output_overrides(settings.output, request),
        tree=_apply_tree_overrides(settings.tree, request),
    )


def _apply_output_overrides(output: OutputSettings, request: RenderRequest) -> OutputSettings:
    overrides: dict[str, object] = {}
    if request.output_format is not None:
        try:
            overrides["output_format"] = OutputFormat(request.output_format.lower())
        except ValueError as exc:
            raise RenderExecutionError(
                f"Unsupported output format: {request.output_format}"
            ) from exc
    if request.output_path is not None:
        overrides["output_path"] = Path(request.output_path)
    if request.title is not None:
        overrides["title"] = request.title
    if request.include_root_metadata is not None:
        overrides["include_root_metadata"] = request.include_root_metadata
    return replace(output, **overrides)


def _apply_tree_overrides(tree: TreeSettings, request: RenderRequest) -> TreeSettings:
    if request.detect_cycles is None:
        return tree
    return replace(tree, detect_cycles=request.detect_cycles)


def _render_text(tree: DocumentNode, output: OutputSettings) -> str:
    if output.output_format is OutputFormat.OUTLINE:
        return render_outline(tree)
    if output.output_format is OutputFormat.JSON:
        return render_json(tree)
    return render_markdown(
        tree, title=output.title, include_root_metadata=output.include_root_metadata
    )
