"""Dependency module location."""

import logging
from pathlib import Path

from pkgtailor.core.errors import DependencyNotFoundError
from pkgtailor.core.paths import get_dependency_candidates

logger = logging.getLogger(__name__)


class DependencyLocator:
    """Finds the oneagent-dependency agent directory.

    Tries a fixed, ordered list of candidate directories derived from
    the module directory and returns the first one that exists.

    Args:
        module_dir: Installed npm module directory.
    """

    def __init__(self, module_dir: Path) -> None:
        self._module_dir = module_dir

    def candidates(self) -> list[Path]:
        """Get the candidate directories in search order."""
        return get_dependency_candidates(self._module_dir)

    def locate(self) -> Path:
        """Locate the dependency module.

        Returns:
            The first existing candidate directory.

        Raises:
            DependencyNotFoundError: If none of the candidates exist.
        """
        candidates = self.candidates()
        for candidate in candidates:
            logger.debug("Testing dependency module location '%s'", candidate)
            if candidate.is_dir():
                logger.debug("Located dependency module at %s", candidate)
                return candidate

        raise DependencyNotFoundError(candidates)
