"""Pydantic v2 models for the create-new-ui scaffolder.

Defines the single configuration record consumed by every renderer together
with the closed vocabularies (foundations, frameworks, bundlers) and the
lookup tables that map them onto package names and version ranges.
"""

from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


PACKAGE_SCOPE = "@new-ui"

PROJECT_NAME_PATTERN = re.compile(r"[a-z0-9_-]+", re.IGNORECASE | re.ASCII)
PROJECT_NAME_MAX_LENGTH = 214


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Foundation(str, Enum):
    """A New UI foundation package a generated project may depend on."""
    RESET = "reset"
    COLORS = "colors"
    SPACINGS = "spacings"
    TYPOGRAPHY = "typography"
    EFFECTS = "effects"

    @property
    def package(self) -> str:
        """Scoped npm package name, e.g. ``@new-ui/colors``."""
        return f"{PACKAGE_SCOPE}/{self.value}"


class Framework(str, Enum):
    """UI framework the generated project is scaffolded around."""
    REACT = "React"
    VUE = "Vue"
    SVELTE = "Svelte"
    NONE = "None"


class Bundler(str, Enum):
    """Build tool wired into the generated project's scripts and config."""
    VITE = "vite"
    RSPACK = "rspack"
    NONE = "None"

    @property
    def label(self) -> str:
        return {"vite": "Vite", "rspack": "Rspack"}.get(self.value, "None")


class AliasConvention(str, Enum):
    """How ``@use`` statements alias foundation modules.

    ``NAME`` is canonical.  ``INDEX`` (``colors_0``, ``reset_1``...) is kept for
    projects generated by the old single-file CLI and is deprecated.
    """
    NAME = "name"
    INDEX = "index"


# ---------------------------------------------------------------------------
# Lookup tables
# ---------------------------------------------------------------------------

FOUNDATION_VERSIONS: dict[Foundation, str] = {
    Foundation.COLORS: "^2.0.1",
    Foundation.EFFECTS: "^0.1.5",
    Foundation.RESET: "^0.0.9",
    Foundation.SPACINGS: "^0.1.5",
    Foundation.TYPOGRAPHY: "^0.1.8",
}

DEFAULT_FOUNDATION_VERSION = "^0.1.0"

FOUNDATION_NAMESPACES: dict[Foundation, str] = {
    Foundation.COLORS: "colors",
    Foundation.EFFECTS: "effects",
    Foundation.RESET: "reset",
    Foundation.SPACINGS: "spacings",
    Foundation.TYPOGRAPHY: "typography",
}


def foundation_version(foundation: Foundation) -> str:
    """Return the version range for *foundation*, falling back to the default."""
    return FOUNDATION_VERSIONS.get(foundation, DEFAULT_FOUNDATION_VERSION)


def foundation_namespace(foundation: Foundation) -> str:
    """Return the SCSS namespace for *foundation* (its own name by default)."""
    return FOUNDATION_NAMESPACES.get(foundation, foundation.value)


def bundler_options(framework: Framework) -> list[Bundler]:
    """Bundlers that may be offered for *framework*.

    Rspack has no usable Svelte integration, so it is never offered for
    Svelte projects.
    """
    options = [Bundler.VITE, Bundler.RSPACK, Bundler.NONE]
    if framework is Framework.SVELTE:
        options.remove(Bundler.RSPACK)
    return options


def validate_project_name(name: str) -> str | None:
    """Return an error message if *name* is not a usable project name."""
    if not name:
        return "Project name is required"
    if not PROJECT_NAME_PATTERN.fullmatch(name):
        return "Project name can only contain letters, numbers, hyphens, and underscores"
    if len(name) > PROJECT_NAME_MAX_LENGTH:
        return f"Project name is too long (max {PROJECT_NAME_MAX_LENGTH} characters)"
    return None


# ---------------------------------------------------------------------------
# Configuration model
# ---------------------------------------------------------------------------


class ProjectConfig(BaseModel):
    """Immutable description of one user's choices."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Project (and directory) name")
    dependencies: tuple[Foundation, ...] = Field(
        default=(),
        description="Selected foundations, in selection order",
    )
    framework: Framework = Field(default=Framework.NONE)
    bundler: Bundler = Field(default=Bundler.NONE)
    scss: bool = Field(
        default=False,
        description="Emit an SCSS entry point aliasing the selected foundations",
    )

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        error = validate_project_name(value)
        if error:
            raise ValueError(error)
        return value

    @field_validator("dependencies")
    @classmethod
    def _dedupe_dependencies(cls, value: tuple[Foundation, ...]) -> tuple[Foundation, ...]:
        # Collapse duplicates, keeping first-seen order.
        return tuple(dict.fromkeys(value))

    @model_validator(mode="after")
    def _check_bundler_supported(self) -> "ProjectConfig":
        if self.bundler not in bundler_options(self.framework):
            raise ValueError(
                f"Bundler {self.bundler.value!r} is not supported with {self.framework.value}"
            )
        return self

    # -- Derived values ----------------------------------------------------

    @property
    def entry_extension(self) -> str:
        return "tsx" if self.framework is Framework.REACT else "ts"

    @property
    def entry_path(self) -> str:
        """Path of the module entry script relative to the project root."""
        return f"src/main.{self.entry_extension}"

    def has(self, foundation: Foundation) -> bool:
        return foundation in self.dependencies
