"""create-new-ui tool settings.

Typed settings for the CLI itself (not for the generated project).  Uses a
Pydantic v2 model so values are validated at construction time and can be
overridden from environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


_TRUTHY = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    """Global create-new-ui settings.

    Instances are created once by the CLI entry point and passed to the
    prompt collector, the generator and the installer.
    """

    output_dir: Path = Field(
        default=Path("."),
        description="Parent directory the project folder is created in",
    )
    package_manager: str = Field(default="npm", min_length=1)
    install_dependencies: bool = Field(
        default=True,
        description="Run '<package_manager> install' after generation",
    )
    install_timeout: int | None = Field(
        default=None,
        ge=1,
        description="Install timeout in seconds; None waits for the package manager",
    )

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            NEW_UI_OUTPUT_DIR, NEW_UI_PACKAGE_MANAGER, NEW_UI_SKIP_INSTALL,
            NEW_UI_INSTALL_TIMEOUT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("NEW_UI_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["NEW_UI_OUTPUT_DIR"])
        if os.environ.get("NEW_UI_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["NEW_UI_PACKAGE_MANAGER"]
        if os.environ.get("NEW_UI_SKIP_INSTALL", "").strip().lower() in _TRUTHY:
            kwargs["install_dependencies"] = False
        if os.environ.get("NEW_UI_INSTALL_TIMEOUT"):
            kwargs["install_timeout"] = int(os.environ["NEW_UI_INSTALL_TIMEOUT"])

        return cls(**kwargs)
