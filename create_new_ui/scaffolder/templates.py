"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``create_new_ui/scaffolder/templates/`` directory and renders them with
project-specific context data.

Autoescaping is disabled: the templates produce TypeScript,
JSON, SCSS and HTML alike, and values are interpolated verbatim.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .models import Foundation, ProjectConfig


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for project scaffolding.

    The renderer loads ``.j2`` template files from a configurable
    template directory.  Templates are rendered with a context dictionary that
    typically contains the project configuration and derived values.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        # Register custom filters
        self.env.filters["package"] = _package_filter

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"react/main.tsx.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _package_filter(value: Foundation | str) -> str:
    """``colors`` -> ``@new-ui/colors``."""
    return Foundation(value).package


# ---------------------------------------------------------------------------
# Context building
# ---------------------------------------------------------------------------

def project_context(config: ProjectConfig, **extra: Any) -> dict[str, Any]:
    """Build the Jinja2 template context shared by every renderer."""
    return {
        "name": config.name,
        "dependencies": list(config.dependencies),
        "framework": config.framework.value,
        "bundler": config.bundler.value,
        "bundler_label": config.bundler.label,
        "scss": config.scss,
        "entry_path": config.entry_path,
        "has_reset": config.has(Foundation.RESET),
        **extra,
    }
