"""Path management for pkgtailor.

The tool operates on an installed npm module directory (the "module dir").
The state file and the dependency search path are fixed relative to it:

- State file: <module_dir>/lib/pkgtailor-state
- Dependency: <module_dir>/node_modules/@dynatrace/oneagent-dependency/agent
  or the sibling <module_dir>/../oneagent-dependency/agent
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "pkgtailor"

# Environment variable selecting the default module directory
MODULE_DIR_ENV_VAR = "PKGTAILOR_MODULE_DIR"

STATE_FILENAME = "pkgtailor-state"

DEPENDENCY_PACKAGE = "oneagent-dependency"
DEPENDENCY_SCOPE = "@dynatrace"
DEPENDENCY_INNER_DIR = "agent"


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/pkgtailor/ (or XDG_CONFIG_HOME/pkgtailor/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_default_module_dir() -> Path:
    """Get the module directory used when none is given on the command line.

    Returns:
        PKGTAILOR_MODULE_DIR if set, otherwise the current working directory.
    """
    override = os.environ.get(MODULE_DIR_ENV_VAR)
    if override:
        return Path(override)
    return Path.cwd()


def get_state_path(module_dir: Path) -> Path:
    """Get the tailoring state file path for a module directory.

    Args:
        module_dir: Installed npm module directory.

    Returns:
        Path to <module_dir>/lib/pkgtailor-state.
    """
    return module_dir / "lib" / STATE_FILENAME


def get_dependency_candidates(module_dir: Path) -> list[Path]:
    """Get the ordered dependency module search path.

    The first entry covers a nested install, the second a flattened
    install where the dependency is a sibling within the npm scope.

    Args:
        module_dir: Installed npm module directory.

    Returns:
        Candidate directories, most specific first.
    """
    inner = Path(DEPENDENCY_PACKAGE) / DEPENDENCY_INNER_DIR
    return [
        module_dir / "node_modules" / DEPENDENCY_SCOPE / inner,
        module_dir.parent / inner,
    ]
