"""Tailoring engine.

Gates every run on the persisted state, then enumerates the dependency
module, selects the files the target environment does not need and
either reports them (dry run) or deletes them between two state writes.
"""

import logging
from collections.abc import Callable
from enum import Enum
from pathlib import Path

from pkgtailor.core.environments import EnvironmentDefinition
from pkgtailor.core.errors import (
    ConflictError,
    DeletionError,
    EnumerationError,
    NoEnvironmentSelectedError,
    TailorError,
    UndefinedStateError,
)
from pkgtailor.core.paths import get_state_path
from pkgtailor.core.state import StateKind, StateStore, TailoringState
from pkgtailor.filesystem.locator import DependencyLocator
from pkgtailor.filesystem.operator import FileOperator
from pkgtailor.filesystem.scanner import enumerate_files
from pkgtailor.models.options import Options
from pkgtailor.models.outcome import OutcomeStatus, TailoringOutcome

logger = logging.getLogger(__name__)

FileEnumerator = Callable[[Path], list[str]]


class Decision(str, Enum):
    """Action permitted by the persisted state."""

    PROCEED = "proceed"
    ALREADY_TAILORED = "already_tailored"


def decide(state: TailoringState, environment: EnvironmentDefinition | None) -> Decision:
    """Decide whether tailoring may proceed.

    Unknown tokens never reach this point: they fail while reading the
    state file.

    Args:
        state: Persisted tailoring state.
        environment: Requested environment, None if not selected.

    Returns:
        PROCEED or ALREADY_TAILORED.

    Raises:
        UndefinedStateError: A previous run was interrupted.
        ConflictError: Already tailored for a different environment.
        NoEnvironmentSelectedError: Untailored and no environment requested.
    """
    requested = environment.name if environment is not None else None

    if state.kind == StateKind.UNDEFINED:
        raise UndefinedStateError()

    if state.kind == StateKind.TAILORED:
        if state.token == requested:
            return Decision.ALREADY_TAILORED
        raise ConflictError(state.token, requested)

    if environment is None:
        raise NoEnvironmentSelectedError()

    return Decision.PROCEED


class TailoringEngine:
    """Runs one tailoring invocation.

    Collaborators default to the real filesystem implementations for the
    module directory given in the options; tests may inject their own.

    Args:
        store: State store. Defaults to the module's state file.
        locator: Dependency locator. Defaults to the module's search path.
        enumerator: Recursive file lister.
        on_delete: Called with each path right before it is deleted.
    """

    def __init__(
        self,
        store: StateStore | None = None,
        locator: DependencyLocator | None = None,
        enumerator: FileEnumerator = enumerate_files,
        on_delete: Callable[[str], None] | None = None,
    ) -> None:
        self._store = store
        self._locator = locator
        self._enumerator = enumerator
        self._on_delete = on_delete

    def run(self, options: Options) -> TailoringOutcome:
        """Run tailoring as configured by the options.

        Core errors are caught and returned in a FAILED outcome.

        Args:
            options: Run options.

        Returns:
            The outcome of the run.
        """
        store = self._store or StateStore(get_state_path(options.module_dir))
        locator = self._locator or DependencyLocator(options.module_dir)

        candidates: list[str] = []
        deleted: list[str] = []
        try:
            state = store.read()
            decision = decide(state, options.environment)
            logger.debug("State %s, decision %s", state.token, decision.value)

            if decision == Decision.ALREADY_TAILORED:
                return TailoringOutcome(
                    status=OutcomeStatus.ALREADY_TAILORED,
                    environment=options.environment,
                    dry_run=options.dry_run,
                )

            environment = options.environment
            if environment is None:
                raise NoEnvironmentSelectedError()

            candidates = self._select_candidates(locator, environment)
            operator = FileOperator(dry_run=options.dry_run, on_delete=self._on_delete)

            if options.dry_run:
                operator.check_access(candidates)
                return TailoringOutcome(
                    status=OutcomeStatus.DRY_RUN,
                    environment=options.environment,
                    dry_run=True,
                    candidates=candidates,
                )

            store.write(TailoringState.undefined())
            try:
                results = operator.delete(candidates)
            except DeletionError as e:
                deleted = e.deleted
                raise
            deleted = [r.path for r in results]
            store.write(TailoringState.tailored_for(environment.name))

        except TailorError as e:
            logger.debug("Tailoring failed: %s", e)
            return TailoringOutcome(
                status=OutcomeStatus.FAILED,
                environment=options.environment,
                dry_run=options.dry_run,
                candidates=candidates,
                deleted=deleted,
                error=e,
            )

        return TailoringOutcome(
            status=OutcomeStatus.TAILORED,
            environment=options.environment,
            dry_run=False,
            candidates=candidates,
            deleted=deleted,
        )

    def _select_candidates(
        self, locator: DependencyLocator, environment: EnvironmentDefinition
    ) -> list[str]:
        """Locate the dependency module and filter its files for deletion."""
        root = locator.locate()
        try:
            all_files = self._enumerator(root)
        except OSError as e:
            raise EnumerationError(root, str(e)) from e
        logger.debug("Found %d files in %s", len(all_files), root)

        candidates = [f for f in all_files if environment.should_delete(f)]
        logger.debug("%d files selected for deletion", len(candidates))
        return candidates
