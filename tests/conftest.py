"""Shared pytest fixtures for the create-new-ui test suite.

Provides reusable fixtures for:
- Temporary output directories
- Representative ``ProjectConfig`` instances
- Mock subprocess helpers
- Scripted console input for the interactive prompts
"""

from __future__ import annotations

import io
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from rich.console import Console

from create_new_ui.scaffolder import Bundler, Foundation, Framework, ProjectConfig


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Parent directory projects are generated into (auto-cleanup)."""
    out = tmp_path / "output"
    out.mkdir()
    yield out


# ---------------------------------------------------------------------------
# Project configurations
# ---------------------------------------------------------------------------

@pytest.fixture
def vanilla_config() -> ProjectConfig:
    """No foundations, no framework, no bundler."""
    return ProjectConfig(
        name="demo-app",
        dependencies=(),
        framework=Framework.NONE,
        bundler=Bundler.NONE,
    )


@pytest.fixture
def react_vite_config() -> ProjectConfig:
    """React + Vite with reset and colors selected (in that order)."""
    return ProjectConfig(
        name="my-app",
        dependencies=(Foundation.RESET, Foundation.COLORS),
        framework=Framework.REACT,
        bundler=Bundler.VITE,
    )


@pytest.fixture
def scss_config() -> ProjectConfig:
    """Vue + Vite with the SCSS entry point enabled."""
    return ProjectConfig(
        name="styled-app",
        dependencies=(Foundation.COLORS, Foundation.TYPOGRAPHY),
        framework=Framework.VUE,
        bundler=Bundler.VITE,
        scss=True,
    )


# ---------------------------------------------------------------------------
# Mock Subprocess (generic)
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_subprocess():
    """Mock asyncio subprocess for testing command execution.

    Returns a factory that creates mock subprocess instances with configurable
    stdout, stderr, and return codes.

    Usage:
        def test_command(mock_subprocess):
            proc = mock_subprocess(stdout="output", returncode=0)
            with patch("asyncio.create_subprocess_exec", return_value=proc):
                ...
    """
    def factory(
        stdout: str = "",
        stderr: str = "",
        returncode: int = 0,
    ) -> AsyncMock:
        mock_proc = AsyncMock()
        mock_proc.communicate = AsyncMock(
            return_value=(stdout.encode("utf-8"), stderr.encode("utf-8"))
        )
        mock_proc.returncode = returncode
        mock_proc.pid = 99999
        mock_proc.kill = MagicMock()
        mock_proc.wait = AsyncMock(return_value=returncode)
        return mock_proc

    return factory


# ---------------------------------------------------------------------------
# Interactive input
# ---------------------------------------------------------------------------

@pytest.fixture
def quiet_console() -> Console:
    """A console that records output instead of printing to the terminal."""
    return Console(file=io.StringIO(), width=120, color_system=None, record=True)


@pytest.fixture
def answers():
    """Build a stream of prompt answers, one line per answer.

    Usage:
        def test_flow(answers):
            stream = answers("my-app", "1,2", "y", "React", "y", "vite", "n", "y")
    """
    def factory(*lines: str) -> io.StringIO:
        return io.StringIO("".join(f"{line}\n" for line in lines))

    return factory
