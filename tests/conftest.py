"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from dataclasses import dataclass
from pathlib import Path

import pytest

# Files of the dependency module, relative to its agent directory
AGENT_FILES: tuple[str, ...] = (
    "package.json",
    "bin/linux-x86-64/oneagentnodejs_46.node",
    "bin/linux-x86-64/oneagentnodejs_48.node",
    "bin/linux-x86-64/oneagentnodejs_51.node",
    "bin/linux-x86-64/oneagentnodejs_57.node",
    "bin/linux-x86-64/liboneagentloader.so",
    "bin/linux-x86-32/oneagentnodejs_46.node",
    "bin/linux-x86-32/oneagentnodejs_48.node",
)


@dataclass
class ModuleLayout:
    """Paths of a fake installed npm module."""

    module_dir: Path
    state_file: Path
    agent_dir: Path

    def agent_path(self, relative: str) -> str:
        return str(self.agent_dir / relative)


def make_module(root: Path, state: str | None = "untailored", nested: bool = True) -> ModuleLayout:
    """Create a fake npm module with its dependency and state file.

    Args:
        root: Directory to create the module in.
        state: Initial state file content, None to omit the state file.
        nested: Install the dependency below node_modules instead of as a sibling.
    """
    module_dir = root / "oneagent"
    (module_dir / "lib").mkdir(parents=True)
    state_file = module_dir / "lib" / "pkgtailor-state"
    if state is not None:
        state_file.write_text(state)

    if nested:
        agent_dir = module_dir / "node_modules" / "@dynatrace" / "oneagent-dependency" / "agent"
    else:
        agent_dir = root / "oneagent-dependency" / "agent"

    for relative in AGENT_FILES:
        path = agent_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"\x7fELF")

    return ModuleLayout(module_dir=module_dir, state_file=state_file, agent_dir=agent_dir)


@pytest.fixture
def module(tmp_path: Path) -> ModuleLayout:
    """An untailored npm module with a nested dependency."""
    return make_module(tmp_path)


@pytest.fixture
def module_factory(tmp_path: Path):
    """Factory creating a fake npm module below tmp_path."""

    def _factory(state: str | None = "untailored", nested: bool = True) -> ModuleLayout:
        return make_module(tmp_path, state=state, nested=nested)

    return _factory
