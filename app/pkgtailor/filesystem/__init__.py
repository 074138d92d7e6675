"""Filesystem access for tailoring.

This module provides file enumeration, dependency module location,
and deletion operations on the dependency module's files.
"""

from pkgtailor.filesystem.locator import DependencyLocator
from pkgtailor.filesystem.operator import FileActionResult, FileOperator
from pkgtailor.filesystem.scanner import enumerate_files, normalize_path

__all__ = [
    "DependencyLocator",
    "FileActionResult",
    "FileOperator",
    "enumerate_files",
    "normalize_path",
]
