"""create-new-ui command-line entry point.

Usage::

    create-new-ui
    python -m create_new_ui

Runs the interactive wizard, generates the project into
``$NEW_UI_OUTPUT_DIR`` (default: the current directory) and then tries to
install its dependencies.

Exit codes: 0 on success or when the user cancels, 1 when generation fails.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Sequence
from pathlib import Path

from rich.markup import escape

from create_new_ui import __version__
from create_new_ui.config import Settings
from create_new_ui.installer import InstallResult, install_dependencies
from create_new_ui.prompts import ProjectPrompter, SetupCancelled
from create_new_ui.scaffolder import ProjectConfig, ProjectGenerator, ScaffoldError
from create_new_ui.utils import (
    console,
    create_progress,
    print_error,
    print_intro,
    print_outro,
    print_success,
    print_warning,
)


FAREWELL = "Setup cancelled. Goodbye!"


def run(settings: Settings, prompter: ProjectPrompter | None = None) -> int:
    """Run the whole wizard and return the process exit code."""
    print_intro("Create New UI App - Setup Wizard")
    prompter = prompter or ProjectPrompter(settings.output_dir)

    try:
        config = prompter.collect()
    except SetupCancelled:
        print_outro(FAREWELL, style="yellow")
        return 0

    if config is None:
        print_outro(
            "Project creation cancelled. Run the command again to start over.",
            style="yellow",
        )
        return 0

    try:
        project_dir = asyncio.run(_generate(config, settings))
    except ScaffoldError as exc:
        print_error(f"Error: {escape(str(exc))}")
        if exc.hint:
            print_warning(exc.hint)
        return 1
    except Exception as exc:
        print_error(f"Error: {escape(str(exc))}")
        return 1

    print_success("Project structure created")

    installed = False
    if settings.install_dependencies:
        result = asyncio.run(_install(project_dir, settings))
        installed = result.success
        if installed:
            print_success(result.message)
        else:
            print_warning(result.message)
            console.print("\nTo install dependencies manually:")
            console.print(f"  cd {_display_path(project_dir)}")
            console.print(f"  {settings.package_manager} install")

    next_step = f"{settings.package_manager} run dev"
    if not installed:
        next_step = f"{settings.package_manager} install && {next_step}"
    print_outro(
        "Your New UI project is ready!\n\n"
        "To get started:\n"
        f"  cd {_display_path(project_dir)}\n"
        f"  {next_step}"
    )
    return 0


async def _generate(config: ProjectConfig, settings: Settings) -> Path:
    generator = ProjectGenerator(config, package_manager=settings.package_manager)
    with create_progress() as progress:
        task = progress.add_task("Creating your project", total=None)
        return await generator.generate(
            settings.output_dir,
            on_progress=lambda label: progress.update(task, description=label),
        )


async def _install(project_dir: Path, settings: Settings) -> InstallResult:
    with create_progress() as progress:
        progress.add_task(
            "Installing dependencies (this may take a moment)", total=None
        )
        return await install_dependencies(
            project_dir,
            package_manager=settings.package_manager,
            timeout=settings.install_timeout,
        )


def _display_path(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point for ``create-new-ui``."""
    parser = argparse.ArgumentParser(
        prog="create-new-ui",
        description="Create a New UI frontend project interactively.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.parse_args(argv)

    try:
        settings = Settings.from_env()
    except ValueError as exc:
        # pydantic's ValidationError is a ValueError too.
        print_error(f"Error: invalid NEW_UI_* environment setting: {escape(str(exc))}")
        sys.exit(1)

    try:
        code = run(settings)
    except KeyboardInterrupt:
        console.print()
        print_outro(FAREWELL, style="yellow")
        code = 0
    sys.exit(code)


if __name__ == "__main__":
    main()
