"""Directory and file writing for generated projects.

Thin async wrappers around ``pathlib`` that translate OS-level failures into
``ScaffoldError`` subclasses carrying the failing path and, where one exists,
a remediation hint for the user.
"""

from __future__ import annotations

import asyncio
import errno
from pathlib import Path


PERMISSION_HINT = (
    "Try running the command with higher privileges or in a directory "
    "where you have write permissions."
)


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ScaffoldError(Exception):
    """Raised when the project directory or one of its files cannot be written."""

    def __init__(self, message: str, path: Path | None = None, hint: str | None = None) -> None:
        self.path = path
        self.hint = hint
        super().__init__(message)


class ProjectExistsError(ScaffoldError):
    """The target project directory already exists."""


class PermissionDeniedError(ScaffoldError):
    """The process may not create or write the target path."""


class WriteError(ScaffoldError):
    """Any other I/O failure while creating a directory or writing a file."""


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------


async def create_project_dir(parent: str | Path, name: str) -> Path:
    """Create ``<parent>/<name>`` and return it.

    Raises:
        ProjectExistsError: If the directory already exists.  Nothing is
            written in that case.
        PermissionDeniedError: If *parent* is not writable.
        WriteError: For any other OS failure.
    """
    project_dir = Path(parent) / name
    if project_dir.exists():
        raise ProjectExistsError(f"Directory {name} already exists!", path=project_dir)
    try:
        await asyncio.to_thread(project_dir.mkdir)
    except FileExistsError as exc:
        raise ProjectExistsError(f"Directory {name} already exists!", path=project_dir) from exc
    except OSError as exc:
        raise _translate(exc, project_dir, f"Cannot create directory {name}") from exc
    return project_dir


async def ensure_dir(path: str | Path) -> Path:
    """Create *path* (and parents) if it does not exist."""
    dir_path = Path(path)
    try:
        await asyncio.to_thread(dir_path.mkdir, parents=True, exist_ok=True)
    except OSError as exc:
        raise _translate(exc, dir_path, f"Cannot create directory {dir_path}") from exc
    return dir_path


async def write_file(path: str | Path, content: str) -> Path:
    """Write *content* to *path*, creating parent directories as needed."""
    file_path = Path(path)
    try:
        await asyncio.to_thread(_write_file, file_path, content)
    except OSError as exc:
        raise _translate(exc, file_path, f"Failed to write to {file_path}") from exc
    return file_path


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def _translate(exc: OSError, path: Path, action: str) -> ScaffoldError:
    if isinstance(exc, PermissionError) or exc.errno in (errno.EACCES, errno.EPERM):
        return PermissionDeniedError(
            f"Permission denied: {action}", path=path, hint=PERMISSION_HINT
        )
    return WriteError(f"{action}: {exc.strerror or exc}", path=path)
