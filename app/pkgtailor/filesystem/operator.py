"""File deletion operator.

Deletes tailoring candidates one by one, stopping at the first failure,
and checks candidate access rights for dry runs.
"""

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from pkgtailor.core.errors import DeletionError, FileAccessError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FileActionResult:
    """Result of a single file operation.

    Attributes:
        path: File that was operated on.
        success: Whether the operation completed successfully.
        error: Error message if the operation failed, None otherwise.
        dry_run: Whether this was a dry-run (no actual deletion).
    """

    path: str
    success: bool
    error: str | None = None
    dry_run: bool = False


class FileOperator:
    """Deletes files from the dependency module.

    Unlike a best-effort cleaner, deletion is all-or-abort: the first
    failure raises, so the caller's state bracket stays visible.

    Args:
        dry_run: If True, only verify access rights.
        on_delete: Called with each path right before it is deleted.
    """

    def __init__(
        self,
        dry_run: bool = False,
        on_delete: Callable[[str], None] | None = None,
    ) -> None:
        self._dry_run = dry_run
        self._on_delete = on_delete

    @property
    def dry_run(self) -> bool:
        return self._dry_run

    def check_access(self, paths: list[str]) -> list[FileActionResult]:
        """Verify that every path is readable and writable.

        Args:
            paths: Files to check.

        Returns:
            One dry-run result per path.

        Raises:
            FileAccessError: On the first path lacking read/write access.
        """
        results: list[FileActionResult] = []
        for path in paths:
            if not os.access(path, os.F_OK | os.R_OK | os.W_OK):
                raise FileAccessError(path)
            logger.info("Dry-run: would delete %s", path)
            results.append(FileActionResult(path=path, success=True, dry_run=True))
        return results

    def delete(self, paths: list[str]) -> list[FileActionResult]:
        """Delete files in order, aborting on the first failure.

        In dry-run mode this only checks access rights.

        Args:
            paths: Files to delete.

        Returns:
            One successful result per deleted path.

        Raises:
            DeletionError: If a file cannot be deleted. Carries the paths
                deleted before the failure.
            FileAccessError: In dry-run mode, if a file is not accessible.
        """
        if self._dry_run:
            return self.check_access(paths)

        results: list[FileActionResult] = []
        for path in paths:
            result = self._delete_single(path)
            if not result.success:
                raise DeletionError(
                    path,
                    result.error or "unknown error",
                    deleted=[r.path for r in results],
                )
            results.append(result)
        return results

    def _delete_single(self, path: str) -> FileActionResult:
        """Delete a single file.

        Args:
            path: File to delete.

        Returns:
            FileActionResult indicating success or failure.
        """
        if self._on_delete is not None:
            self._on_delete(path)
        logger.info("Deleting file %s", path)

        try:
            Path(path).unlink()
        except FileNotFoundError:
            return FileActionResult(
                path=path,
                success=False,
                error=f"File does not exist: {path}",
            )
        except OSError as e:
            return FileActionResult(path=path, success=False, error=str(e))

        return FileActionResult(path=path, success=True)
