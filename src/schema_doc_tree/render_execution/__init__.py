"""Render execution domain exports."""

from .render_contracts import RenderOutcome, RenderRequest, RenderSettings
from .render_use_case import RenderExecutionError, execute_schema_render, resolve_render_settings

__all__ = [
    "RenderRequest",
    "RenderOutcome",
    "RenderSettings",
    "RenderExecutionError",
    "execute_schema_render",
    "resolve_render_settings",
]
