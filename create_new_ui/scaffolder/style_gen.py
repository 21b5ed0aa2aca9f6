"""SCSS entry point generation.

When ``ProjectConfig.scss`` is set, the project gets ``src/scss/main.scss``
which aliases every selected foundation module with ``@use`` and then styles
``:root`` and ``body`` from the custom properties those modules provide.  The
same ``@use`` statements are injected into every other stylesheet through the
bundler's preprocessor options (see ``framework_gen``).

Aliases are keyed by foundation name (``@use '@new-ui/colors' as colors;``).
The positional form (``as colors_0``) written by the old single-file CLI is
still available through ``AliasConvention.INDEX`` but is deprecated.
"""

from __future__ import annotations

from collections.abc import Iterable

from .models import AliasConvention, Foundation, ProjectConfig, foundation_namespace
from .templates import TemplateRenderer, project_context


def scss_use_lines(
    foundations: Iterable[Foundation],
    convention: AliasConvention = AliasConvention.NAME,
) -> list[str]:
    """Return one ``@use`` statement per unique foundation, first-seen order."""
    unique = list(dict.fromkeys(foundations))
    lines: list[str] = []
    for index, foundation in enumerate(unique):
        if convention is AliasConvention.INDEX:
            alias = f"{foundation.value}_{index}"
        else:
            alias = foundation_namespace(foundation)
        lines.append(f"@use '{foundation.package}' as {alias};")
    return lines


def scss_injection(
    config: ProjectConfig, convention: AliasConvention = AliasConvention.NAME
) -> str:
    """The preprocessor ``additionalData`` string for *config*."""
    return "\n".join(scss_use_lines(config.dependencies, convention))


class StyleGenerator:
    """Renders the SCSS entry point."""

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    def render(self, config: ProjectConfig) -> dict[str, str]:
        """Return ``{"src/scss/main.scss": ...}``, or nothing when SCSS is off."""
        if not config.scss:
            return {}
        ctx = project_context(config, use_lines=scss_use_lines(config.dependencies))
        return {"src/scss/main.scss": self.renderer.render("scss/main.scss.j2", ctx)}
