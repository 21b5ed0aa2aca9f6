"""Interactive collection of a ``ProjectConfig``.

Walks the user through name -> foundations -> framework -> bundler -> SCSS
-> summary -> confirmation using ``rich.prompt``.  The console and the input
stream are injectable so the whole flow can be driven from tests.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.prompt import Confirm, Prompt

from create_new_ui.scaffolder.models import (
    Bundler,
    Foundation,
    Framework,
    ProjectConfig,
    bundler_options,
    validate_project_name,
)
from create_new_ui.utils import console as default_console
from create_new_ui.utils import print_summary_table


class SetupCancelled(Exception):
    """The user interrupted the wizard (Ctrl-C or end of input)."""


_FOUNDATION_ORDER: list[Foundation] = [
    Foundation.RESET,
    Foundation.COLORS,
    Foundation.SPACINGS,
    Foundation.TYPOGRAPHY,
    Foundation.EFFECTS,
]


def parse_foundations(raw: str) -> list[Foundation]:
    """Parse a comma/space separated foundation selection.

    Accepts names (``colors``), package names (``@new-ui/colors``) and
    1-based menu numbers.  Order is kept and duplicates are dropped.

    Raises:
        ValueError: On an unknown entry.
    """
    selected: list[Foundation] = []
    for token in re.split(r"[,\s]+", raw.strip()):
        if not token:
            continue
        if token.isdigit():
            index = int(token) - 1
            if not 0 <= index < len(_FOUNDATION_ORDER):
                raise ValueError(f"No foundation numbered {token}")
            foundation = _FOUNDATION_ORDER[index]
        else:
            name = token.lower().removeprefix("@new-ui/")
            try:
                foundation = Foundation(name)
            except ValueError:
                raise ValueError(f"Unknown foundation: {token}") from None
        if foundation not in selected:
            selected.append(foundation)
    return selected


class ProjectPrompter:
    """Asks the questions and assembles an immutable ``ProjectConfig``."""

    def __init__(
        self,
        output_dir: str | Path = ".",
        *,
        console: Console | None = None,
        stream: TextIO | None = None,
    ) -> None:
        self.output_dir = Path(output_dir)
        self.console = console or default_console
        self.stream = stream

    # -- Public API --------------------------------------------------------

    def collect(self) -> ProjectConfig | None:
        """Run the wizard.

        Returns:
            The confirmed configuration, or ``None`` if the user declined at
            the final confirmation.

        Raises:
            SetupCancelled: If the user pressed Ctrl-C or input ended.
        """
        try:
            return self._collect()
        except (KeyboardInterrupt, EOFError) as exc:
            raise SetupCancelled() from exc

    # -- Steps -------------------------------------------------------------

    def _collect(self) -> ProjectConfig | None:
        while True:
            name = self.ask_name()
            dependencies = self.ask_foundations()
            if not dependencies and not self._confirm(
                "No New UI foundations selected. Are you sure you want to continue?",
                default=False,
            ):
                self.console.print("[dim]Starting over.[/dim]\n")
                continue

            framework = self.ask_framework()
            bundler = self.ask_bundler(framework)
            scss = self._confirm("Add an SCSS entry point for the foundations?", default=False)

            config = ProjectConfig(
                name=name,
                dependencies=tuple(dependencies),
                framework=framework,
                bundler=bundler,
                scss=scss,
            )
            self.show_summary(config)

            if not self._confirm("Create project with these settings?", default=True):
                return None
            return config

    def ask_name(self) -> str:
        while True:
            value = self._ask("What is your project name?", default="my-new-ui-app").strip()
            error = validate_project_name(value)
            if error is None and (self.output_dir / value).exists():
                error = "Directory already exists"
            if error is None:
                return value
            self.console.print(f"[red]{error}[/red]")

    def ask_foundations(self) -> list[Foundation]:
        self.console.print("Available New UI foundations:")
        for number, foundation in enumerate(_FOUNDATION_ORDER, start=1):
            self.console.print(f"  [cyan]{number}[/cyan]. {foundation.package}")
        while True:
            raw = self._ask(
                "Select foundations to include (comma-separated, blank for none)",
                default="",
                show_default=False,
            )
            try:
                return parse_foundations(raw)
            except ValueError as exc:
                self.console.print(f"[red]{exc}[/red]")

    def ask_framework(self) -> Framework:
        if not self._confirm("Do you want to include a frontend framework?", default=True):
            return Framework.NONE
        choice = self._ask(
            "Select a frontend framework",
            choices=[f.value for f in Framework],
            default=Framework.REACT.value,
        )
        return Framework(choice)

    def ask_bundler(self, framework: Framework) -> Bundler:
        if not self._confirm("Do you want to include a bundler?", default=True):
            return Bundler.NONE
        options = bundler_options(framework)
        if Bundler.RSPACK not in options:
            self.console.print(
                "[yellow]Note: Rspack is not fully compatible with Svelte. "
                "Only Vite is recommended for Svelte projects.[/yellow]"
            )
        choice = self._ask(
            "Select a bundler",
            choices=[b.value for b in options],
            default=Bundler.VITE.value,
        )
        return Bundler(choice)

    def show_summary(self, config: ProjectConfig) -> None:
        print_summary_table(
            {
                "Name": config.name,
                "New UI foundations": ", ".join(f.value for f in config.dependencies) or "None",
                "Framework": config.framework.value,
                "Bundler": config.bundler.label,
                "SCSS": "yes" if config.scss else "no",
            },
            title="Project Summary",
            target=self.console,
        )

    # -- Prompt wrappers ---------------------------------------------------

    def _ask(self, question: str, **kwargs) -> str:
        return Prompt.ask(question, console=self.console, stream=self.stream, **kwargs)

    def _confirm(self, question: str, *, default: bool) -> bool:
        return Confirm.ask(question, console=self.console, stream=self.stream, default=default)
