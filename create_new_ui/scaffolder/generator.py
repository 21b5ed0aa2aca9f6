"""Main scaffolding orchestrator.

Takes a ``ProjectConfig`` and generates a New UI frontend project: npm
manifest, README, HTML entry point, framework sources, TypeScript config,
bundler config and (optionally) an SCSS entry point.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from .filesystem import create_project_dir, ensure_dir, write_file
from .framework_gen import FrameworkGenerator
from .manifest_gen import render_manifest
from .markup_gen import render_markup, render_readme
from .models import ProjectConfig
from .style_gen import StyleGenerator
from .templates import TemplateRenderer


ProgressCallback = Callable[[str], None]


class ProjectGenerator:
    """Main scaffolding orchestrator.

    Given a ``ProjectConfig``, renders every output file and writes them into
    a freshly created project directory.  Rendering is deterministic: two
    runs with the same configuration produce byte-identical files.
    """

    def __init__(self, config: ProjectConfig, *, package_manager: str = "npm") -> None:
        self.config = config
        self.package_manager = package_manager
        self.renderer = TemplateRenderer()
        self.framework_gen = FrameworkGenerator(self.renderer)
        self.style_gen = StyleGenerator(self.renderer)

    # -- Public API --------------------------------------------------------

    def render_files(self) -> dict[str, str]:
        """Render every file without touching the filesystem.

        Returns:
            Mapping of path (relative to the project root, ``/``-separated)
            to file content, in generation order.
        """
        files: dict[str, str] = {}
        for _, render in self._steps():
            files.update(render())
        return files

    async def generate(
        self,
        output_dir: str | Path,
        on_progress: ProgressCallback | None = None,
    ) -> Path:
        """Generate the project under ``<output_dir>/<name>``.

        Args:
            output_dir: Parent directory for the project folder.  It is used
                as given; the process working directory is never changed.
            on_progress: Optional callback receiving a short description
                before each step.

        Returns:
            Path to the generated project root.

        Raises:
            ScaffoldError: If the directory exists or a write fails.  Files
                written before the failure are left in place.
        """
        project_root = await create_project_dir(output_dir, self.config.name)

        for label, render in self._steps():
            if on_progress is not None:
                on_progress(label)
            await self._write_all(project_root, render())

        # index.html expects a static asset directory next to it.
        await ensure_dir(project_root / "public")

        return project_root

    # -- Steps -------------------------------------------------------------

    def _steps(self) -> list[tuple[str, Callable[[], dict[str, str]]]]:
        """Renderers in generation order: manifest, README, markup, framework, styles."""
        return [
            ("Writing package.json", lambda: render_manifest(self.config)),
            (
                "Writing README.md",
                lambda: render_readme(
                    self.config, self.renderer, package_manager=self.package_manager
                ),
            ),
            ("Writing index.html", lambda: render_markup(self.config, self.renderer)),
            ("Scaffolding sources", lambda: self.framework_gen.render(self.config)),
            ("Writing SCSS entry point", lambda: self.style_gen.render(self.config)),
        ]

    async def _write_all(self, root: Path, files: dict[str, str]) -> None:
        for relative, content in files.items():
            await write_file(root / relative, content)
