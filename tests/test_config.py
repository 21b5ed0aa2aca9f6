"""Unit tests for the Settings model (create_new_ui.config).

Tests cover:
- Settings defaults and validation
- Settings.from_env with each recognised variable
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from create_new_ui.config import Settings


_ENV_VARS = (
    "NEW_UI_OUTPUT_DIR",
    "NEW_UI_PACKAGE_MANAGER",
    "NEW_UI_SKIP_INSTALL",
    "NEW_UI_INSTALL_TIMEOUT",
)


def _clean_env() -> dict[str, str]:
    return {k: v for k, v in os.environ.items() if k not in _ENV_VARS}


# ---------------------------------------------------------------------------
# Settings defaults
# ---------------------------------------------------------------------------


class TestSettingsDefaults:
    @pytest.mark.unit
    def test_defaults(self):
        settings = Settings()
        assert settings.output_dir == Path(".")
        assert settings.package_manager == "npm"
        assert settings.install_dependencies is True
        assert settings.install_timeout is None

    @pytest.mark.unit
    def test_empty_package_manager_rejected(self):
        with pytest.raises(ValidationError):
            Settings(package_manager="")

    @pytest.mark.unit
    def test_non_positive_timeout_rejected(self):
        with pytest.raises(ValidationError):
            Settings(install_timeout=0)


# ---------------------------------------------------------------------------
# Settings.from_env
# ---------------------------------------------------------------------------


class TestSettingsFromEnv:
    @pytest.mark.unit
    def test_no_variables_gives_defaults(self):
        with patch.dict(os.environ, _clean_env(), clear=True):
            settings = Settings.from_env()
        assert settings == Settings()

    @pytest.mark.unit
    def test_output_dir(self, tmp_path: Path):
        env = {**_clean_env(), "NEW_UI_OUTPUT_DIR": str(tmp_path)}
        with patch.dict(os.environ, env, clear=True):
            settings = Settings.from_env()
        assert settings.output_dir == tmp_path

    @pytest.mark.unit
    def test_package_manager(self):
        env = {**_clean_env(), "NEW_UI_PACKAGE_MANAGER": "pnpm"}
        with patch.dict(os.environ, env, clear=True):
            settings = Settings.from_env()
        assert settings.package_manager == "pnpm"

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["1", "true", "YES", "on"])
    def test_skip_install_truthy(self, value: str):
        env = {**_clean_env(), "NEW_UI_SKIP_INSTALL": value}
        with patch.dict(os.environ, env, clear=True):
            settings = Settings.from_env()
        assert settings.install_dependencies is False

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["0", "false", "", "nope"])
    def test_skip_install_falsy(self, value: str):
        env = {**_clean_env(), "NEW_UI_SKIP_INSTALL": value}
        with patch.dict(os.environ, env, clear=True):
            settings = Settings.from_env()
        assert settings.install_dependencies is True

    @pytest.mark.unit
    def test_install_timeout(self):
        env = {**_clean_env(), "NEW_UI_INSTALL_TIMEOUT": "90"}
        with patch.dict(os.environ, env, clear=True):
            settings = Settings.from_env()
        assert settings.install_timeout == 90

    @pytest.mark.unit
    def test_invalid_install_timeout(self):
        env = {**_clean_env(), "NEW_UI_INSTALL_TIMEOUT": "soon"}
        with patch.dict(os.environ, env, clear=True):
            with pytest.raises(ValueError):
                Settings.from_env()
