"""Best-effort dependency installation for a freshly generated project.

Installation is a convenience: every failure (missing package manager,
network trouble, non-zero exit, timeout) is reported back as an
``InstallResult`` instead of being raised, so the caller can fall back to
printing manual instructions.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from create_new_ui.utils import run_command


_NETWORK_MARKERS = ("network", "ENOTFOUND", "ECONNREFUSED", "ETIMEDOUT", "EAI_AGAIN")


@dataclass(frozen=True)
class InstallResult:
    """Outcome of an installation attempt."""

    success: bool
    message: str = ""


async def check_package_manager(package_manager: str) -> bool:
    """Return ``True`` if ``<package_manager> --version`` runs successfully."""
    try:
        returncode, _, _ = await run_command([package_manager, "--version"], timeout=30)
    except OSError:
        return False
    return returncode == 0


async def install_dependencies(
    project_dir: str | Path,
    package_manager: str = "npm",
    timeout: float | None = None,
) -> InstallResult:
    """Run ``<package_manager> install`` inside *project_dir*.

    Args:
        project_dir: Root of the generated project.
        package_manager: Executable to run (``npm``, ``pnpm``, ``yarn``...).
        timeout: Optional limit in seconds; ``None`` waits indefinitely.

    Returns:
        An ``InstallResult``.  Never raises for installation failures.
    """
    if not await check_package_manager(package_manager):
        return InstallResult(
            False,
            f"{package_manager} not found. Dependencies will not be installed automatically.",
        )

    try:
        returncode, stdout, stderr = await run_command(
            [package_manager, "install"], cwd=project_dir, timeout=timeout
        )
    except OSError as exc:
        return InstallResult(False, f"Failed to install dependencies: {exc}")

    if returncode == 0:
        return InstallResult(True, "Dependencies installed successfully")

    output = stderr or stdout
    if any(marker in output for marker in _NETWORK_MARKERS):
        return InstallResult(
            False,
            "Network error: Failed to install dependencies. "
            "Please check your internet connection.",
        )
    detail = output.splitlines()[-1] if output else f"exit code {returncode}"
    return InstallResult(False, f"Failed to install dependencies: {detail}")
