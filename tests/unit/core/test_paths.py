"""Unit tests for path management."""

import os
from pathlib import Path
from unittest.mock import patch

from pkgtailor.core.paths import (
    APP_NAME,
    MODULE_DIR_ENV_VAR,
    get_config_dir,
    get_default_module_dir,
    get_dependency_candidates,
    get_state_path,
)


class TestGetConfigDir:
    """Tests for get_config_dir function."""

    def test_default_config_dir(self) -> None:
        """get_config_dir returns default path when XDG_CONFIG_HOME not set."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": ""}):
            result = get_config_dir()

        assert result == Path.home() / ".config" / APP_NAME

    def test_respects_xdg_config_home(self, tmp_path: Path) -> None:
        """get_config_dir respects XDG_CONFIG_HOME environment variable."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            result = get_config_dir()

        assert result == tmp_path / APP_NAME


class TestGetDefaultModuleDir:
    """Tests for get_default_module_dir function."""

    def test_defaults_to_cwd(self) -> None:
        """Without override the current directory is used."""
        with patch.dict(os.environ, {MODULE_DIR_ENV_VAR: ""}):
            assert get_default_module_dir() == Path.cwd()

    def test_respects_env_override(self, tmp_path: Path) -> None:
        """PKGTAILOR_MODULE_DIR overrides the current directory."""
        with patch.dict(os.environ, {MODULE_DIR_ENV_VAR: str(tmp_path)}):
            assert get_default_module_dir() == tmp_path


class TestModulePaths:
    """Tests for paths derived from the module directory."""

    def test_state_path(self, tmp_path: Path) -> None:
        """State file lives in the module's lib directory."""
        assert get_state_path(tmp_path) == tmp_path / "lib" / "pkgtailor-state"

    def test_dependency_candidates_order(self, tmp_path: Path) -> None:
        """Nested install is tried before the sibling install."""
        module_dir = tmp_path / "oneagent"

        assert get_dependency_candidates(module_dir) == [
            module_dir / "node_modules" / "@dynatrace" / "oneagent-dependency" / "agent",
            tmp_path / "oneagent-dependency" / "agent",
        ]
