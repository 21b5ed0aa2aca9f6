"""``index.html`` and ``README.md`` generation."""

from __future__ import annotations

from .models import ProjectConfig
from .templates import TemplateRenderer, project_context


def render_markup(
    config: ProjectConfig, renderer: TemplateRenderer | None = None
) -> dict[str, str]:
    """Render the HTML entry point.

    The module script points at ``src/main.tsx`` for React and
    ``src/main.ts`` otherwise.  Selecting the ``reset`` foundation adds a
    description meta tag to the document head.  The project name is
    interpolated without escaping.
    """
    renderer = renderer or TemplateRenderer()
    ctx = project_context(config)
    return {"index.html": renderer.render("index.html.j2", ctx)}


def render_readme(
    config: ProjectConfig,
    renderer: TemplateRenderer | None = None,
    *,
    package_manager: str = "npm",
) -> dict[str, str]:
    """Render the project README."""
    renderer = renderer or TemplateRenderer()
    ctx = project_context(config, package_manager=package_manager)
    return {"README.md": renderer.render("README.md.j2", ctx)}
