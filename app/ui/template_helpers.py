"""Utilities for rendering UI templates with shared context."""
from __future__ import annotations

from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render_template(request: Request, template_name: str, context: dict[str, Any] | None = None):
    """Return a TemplateResponse with the shared page context."""

    base_context: dict[str, Any] = {
        "app_name": request.app.state.settings.app_name,
        "page_title": "",
    }
    if context:
        base_context.update(context)

    response = templates.TemplateResponse(request, template_name, base_context)
    response.headers["Vary"] = "Accept"
    return response


__all__ = ["render_template", "templates"]
