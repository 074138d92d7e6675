"""Result of a tailoring engine run."""

from dataclasses import dataclass, field
from enum import Enum

from pkgtailor.core.environments import EnvironmentDefinition
from pkgtailor.core.errors import TailorError


class OutcomeStatus(str, Enum):
    """How a tailoring run ended.

    Attributes:
        TAILORED: Files were deleted and the new state was persisted.
        DRY_RUN: Candidate files were reported, nothing changed.
        ALREADY_TAILORED: Module was already tailored for the environment.
        FAILED: The run aborted with an error.
    """

    TAILORED = "tailored"
    DRY_RUN = "dry_run"
    ALREADY_TAILORED = "already_tailored"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class TailoringOutcome:
    """Outcome of a single engine run.

    Attributes:
        status: How the run ended.
        environment: Environment requested for the run, if any.
        dry_run: Whether the run was a dry run.
        candidates: Files selected for deletion (empty if never computed).
        deleted: Files actually deleted, in order.
        error: The error that aborted the run, if any.
    """

    status: OutcomeStatus
    environment: EnvironmentDefinition | None
    dry_run: bool
    candidates: list[str] = field(default_factory=list)
    deleted: list[str] = field(default_factory=list)
    error: TailorError | None = None

    @property
    def succeeded(self) -> bool:
        return self.status != OutcomeStatus.FAILED
