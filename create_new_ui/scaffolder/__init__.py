"""create-new-ui scaffolder -- generates New UI frontend projects.

This package takes a ``ProjectConfig`` and renders a deterministic set of
boilerplate files (``package.json``, ``index.html``, framework sources,
TypeScript and bundler config) into a new project directory.

Quick usage::

    from create_new_ui.scaffolder import Framework, ProjectConfig, ProjectGenerator

    config = ProjectConfig(
        name="my-project",
        dependencies=["reset", "colors"],
        framework=Framework.REACT,
        bundler="vite",
    )
    generator = ProjectGenerator(config)
    project_path = await generator.generate("/tmp/output")
"""

from create_new_ui.scaffolder.filesystem import (
    PermissionDeniedError,
    ProjectExistsError,
    ScaffoldError,
    WriteError,
)
from create_new_ui.scaffolder.generator import ProjectGenerator
from create_new_ui.scaffolder.models import (
    AliasConvention,
    Bundler,
    Foundation,
    Framework,
    ProjectConfig,
    bundler_options,
)
from create_new_ui.scaffolder.templates import TemplateRenderer

__all__ = [
    "AliasConvention",
    "Bundler",
    "Foundation",
    "Framework",
    "PermissionDeniedError",
    "ProjectConfig",
    "ProjectExistsError",
    "ProjectGenerator",
    "ScaffoldError",
    "TemplateRenderer",
    "WriteError",
    "bundler_options",
]
