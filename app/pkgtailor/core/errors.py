"""Exceptions raised by the tailoring core.

Every error here is terminal for the current invocation. The engine
catches them and hands them to the CLI as data; rendering happens in
``pkgtailor.cli.display``.
"""

from pathlib import Path


class TailorError(Exception):
    """Base exception for all tailoring errors."""


class StateAccessError(TailorError):
    """Raised when the state file is missing, unreadable or unwritable."""

    def __init__(self, path: Path, reason: str | None = None) -> None:
        self.path = path
        self.reason = reason
        msg = f"State file {path} is not accessible"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class FileAccessError(TailorError):
    """Raised when a deletion candidate lacks read/write access."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"File is not readable and writable: {path}")


class InconsistentStateError(TailorError):
    """Base exception for persisted states that forbid tailoring."""


class UnknownStateError(InconsistentStateError):
    """Raised when the state file holds a token outside the known set."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"npm module is in an unknown tailoring state '{token}'")


class UndefinedStateError(InconsistentStateError):
    """Raised when a previous run was interrupted during deletion."""

    def __init__(self) -> None:
        super().__init__(
            "Previous tailoring left the npm module in an undefined state. "
            "Please re-install the npm module."
        )


class ConflictError(TailorError):
    """Raised when the module is already tailored for another environment."""

    def __init__(self, tailored_for: str, requested: str | None) -> None:
        self.tailored_for = tailored_for
        self.requested = requested
        super().__init__(
            f"npm module has already been tailored for environment '{tailored_for}', "
            f"cannot tailor for '{requested or '<none>'}'"
        )


class DependencyNotFoundError(TailorError):
    """Raised when no candidate dependency directory exists."""

    def __init__(self, candidates: list[Path]) -> None:
        self.candidates = candidates
        super().__init__("Could not locate 'oneagent-dependency' module")


class NoEnvironmentSelectedError(TailorError):
    """Raised when tailoring is requested without an environment."""

    def __init__(self) -> None:
        super().__init__("No environment for tailoring specified")


class DeletionError(TailorError):
    """Raised when deleting a candidate file fails mid-run.

    Attributes:
        path: The file that could not be deleted.
        deleted: Files deleted before the failure, in order.
    """

    def __init__(self, path: str, reason: str, deleted: list[str]) -> None:
        self.path = path
        self.reason = reason
        self.deleted = deleted
        super().__init__(f"Failed to delete {path}: {reason}")


class EnumerationError(TailorError):
    """Raised when the dependency module's files cannot be listed."""

    def __init__(self, root: Path, reason: str) -> None:
        self.root = root
        self.reason = reason
        super().__init__(f"Failed to list files in {root}: {reason}")
