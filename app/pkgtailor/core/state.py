"""Persisted tailoring state.

The state file holds a single plain-text token. Tailoring writes it twice:
first ``undefined`` before any file is deleted, then the environment name
once all deletions succeeded. A crash in between leaves ``undefined``
behind, which blocks further runs until the module is re-installed.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pkgtailor.core.environments import ENVIRONMENTS, get_environment_by_name
from pkgtailor.core.errors import StateAccessError, UnknownStateError

logger = logging.getLogger(__name__)

NOT_TAILORED_TOKEN = "untailored"
UNDEFINED_TOKEN = "undefined"


class StateKind(str, Enum):
    """Kind of persisted tailoring state."""

    NOT_TAILORED = "not_tailored"
    UNDEFINED = "undefined"
    TAILORED = "tailored"


@dataclass(frozen=True, slots=True)
class TailoringState:
    """A tailoring state as persisted in the state file.

    Attributes:
        kind: Whether the module is untouched, broken, or tailored.
        environment: Environment name, set only for TAILORED states.
    """

    kind: StateKind
    environment: str | None = None

    def __post_init__(self) -> None:
        """Validate that only tailored states carry an environment."""
        if (self.kind == StateKind.TAILORED) != (self.environment is not None):
            msg = "Only TAILORED states carry an environment name"
            raise ValueError(msg)

    @classmethod
    def not_tailored(cls) -> "TailoringState":
        return cls(StateKind.NOT_TAILORED)

    @classmethod
    def undefined(cls) -> "TailoringState":
        return cls(StateKind.UNDEFINED)

    @classmethod
    def tailored_for(cls, environment: str) -> "TailoringState":
        return cls(StateKind.TAILORED, environment)

    @classmethod
    def from_token(cls, token: str) -> "TailoringState":
        """Parse a persisted token.

        Args:
            token: Raw state file content.

        Returns:
            The matching TailoringState.

        Raises:
            UnknownStateError: If the token is not in the known set.
        """
        value = token.strip()
        if value == NOT_TAILORED_TOKEN:
            return cls.not_tailored()
        if value == UNDEFINED_TOKEN:
            return cls.undefined()
        env = get_environment_by_name(value)
        if env is not None:
            return cls.tailored_for(env.name)
        raise UnknownStateError(value)

    @property
    def token(self) -> str:
        """Token written to the state file."""
        if self.environment is not None:
            return self.environment
        if self.kind == StateKind.UNDEFINED:
            return UNDEFINED_TOKEN
        return NOT_TAILORED_TOKEN


def state_tokens() -> tuple[str, ...]:
    """Get the closed set of valid state file tokens."""
    return (NOT_TAILORED_TOKEN, UNDEFINED_TOKEN, *(env.name for env in ENVIRONMENTS))


class StateStore:
    """Reads and writes the tailoring state file.

    The file must already exist: it is created when the npm module is
    packaged, and a missing file is an error rather than an implicit
    "not tailored". Reading requires write access as well, since every
    read precedes a possible write.

    Attributes:
        path: Location of the state file.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def read_token(self) -> str:
        """Read the raw state token.

        Returns:
            The state file content with surrounding whitespace removed.

        Raises:
            StateAccessError: If the file is missing or not readable and writable.
        """
        if not os.access(self._path, os.F_OK):
            raise StateAccessError(self._path, "file does not exist")
        if not os.access(self._path, os.R_OK | os.W_OK):
            raise StateAccessError(self._path, "read and write access required")

        try:
            token = self._path.read_text(encoding="utf-8").strip()
        except OSError as e:
            raise StateAccessError(self._path, str(e)) from e

        logger.debug("Read state '%s' from %s", token, self._path)
        return token

    def read(self) -> TailoringState:
        """Read and parse the persisted state.

        Raises:
            StateAccessError: If the file is missing or not accessible.
            UnknownStateError: If the file holds an unknown token.
        """
        return TailoringState.from_token(self.read_token())

    def write(self, state: TailoringState) -> None:
        """Overwrite the state file with a new state.

        Args:
            state: State to persist.

        Raises:
            StateAccessError: If the file cannot be written.
        """
        try:
            self._path.write_text(state.token, encoding="utf-8")
        except OSError as e:
            raise StateAccessError(self._path, str(e)) from e
        logger.debug("Wrote state '%s' to %s", state.token, self._path)
