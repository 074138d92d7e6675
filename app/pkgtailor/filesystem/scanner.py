"""Recursive file enumeration.

Lists every regular file below a root directory. On Windows the paths
are normalized to lower-case forward-slash form, which the environment
predicates rely on for matching.
"""

import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def normalize_path(path: str, platform: str = sys.platform) -> str:
    """Normalize a path for predicate matching.

    Args:
        path: Path as produced by the operating system.
        platform: Platform identifier (defaults to the running platform).

    Returns:
        On win32, the path lower-cased with forward slashes; otherwise unchanged.
    """
    if platform == "win32":
        return path.replace("\\", "/").lower()
    return path


def enumerate_files(root: Path, platform: str = sys.platform) -> list[str]:
    """Recursively list all regular files below a directory.

    Entries are visited in sorted order so the result is stable across
    runs. Directories themselves are never included.

    Args:
        root: Directory to scan.
        platform: Platform identifier used for path normalization.

    Returns:
        Normalized file paths.

    Raises:
        OSError: If a directory cannot be listed.
    """
    files: list[str] = []
    for entry in sorted(root.iterdir()):
        if entry.is_dir():
            files.extend(enumerate_files(entry, platform))
        elif entry.is_file():
            files.append(normalize_path(str(entry), platform))
    return files
