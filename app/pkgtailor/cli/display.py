"""Console rendering of tailoring progress and outcomes.

The engine reports what happened as data; this module decides how it
is shown to the user.
"""

from rich.markup import escape

from pkgtailor.core.errors import (
    ConflictError,
    DeletionError,
    DependencyNotFoundError,
    EnumerationError,
    TailorError,
)
from pkgtailor.core.state import NOT_TAILORED_TOKEN, UNDEFINED_TOKEN, state_tokens
from pkgtailor.models.options import Options
from pkgtailor.models.outcome import OutcomeStatus, TailoringOutcome
from pkgtailor.utils.formatting import (
    console,
    print_error,
    print_info,
    print_success,
    print_warning,
)


def print_tailoring_header(options: Options) -> None:
    """Announce the environment a run is tailoring for."""
    if options.environment is None:
        return
    console.print(
        f"\nTailoring npm module for environment '[bold]{escape(options.environment.name)}[/]'",
        soft_wrap=True,
    )


def print_deleting(path: str) -> None:
    """Report a file right before it is deleted."""
    console.print(f"  [removed]deleting file[/] '{escape(path)}'", soft_wrap=True)


def print_candidates(candidates: list[str]) -> None:
    """List the files a dry run would delete."""
    if not candidates:
        print_info("Dry run - no files would be deleted from the npm module")
        return

    print_info("Dry run - following files will be deleted from the npm module")
    for path in candidates:
        console.print(f"  {escape(path)}", soft_wrap=True)
    console.print(f"\n[dim]{len(candidates)} file(s) would be deleted[/dim]")


def format_error(error: TailorError) -> list[str]:
    """Render an error as one or more message lines.

    Args:
        error: The error that aborted a run.

    Returns:
        The error message followed by hints on how to recover.
    """
    lines = [str(error)]

    if isinstance(error, ConflictError) and error.requested is not None:
        lines.append(
            "Please uninstall and re-install the npm module to tailor for "
            f"environment '{error.requested}'"
        )
    elif isinstance(error, DependencyNotFoundError):
        lines.extend(f"  searched: {candidate}" for candidate in error.candidates)
    elif isinstance(error, EnumerationError):
        lines.append("No files were deleted, the npm module is unchanged.")
    elif isinstance(error, DeletionError):
        lines.append(
            f"{len(error.deleted)} file(s) were deleted before the failure. "
            "The npm module is left in an undefined state, please re-install it."
        )

    return lines


def print_outcome(outcome: TailoringOutcome) -> None:
    """Print the result of a run followed by the summary line."""
    if outcome.status == OutcomeStatus.ALREADY_TAILORED and outcome.environment is not None:
        print_info(
            "The npm module has already been tailored for environment "
            f"'{escape(outcome.environment.name)}'"
        )
    elif outcome.status == OutcomeStatus.DRY_RUN:
        print_candidates(outcome.candidates)
    elif outcome.status == OutcomeStatus.TAILORED:
        print_success(f"{len(outcome.deleted)} file(s) deleted")

    if outcome.error is not None:
        first, *rest = format_error(outcome.error)
        print_error(escape(first))
        for line in rest:
            print_warning(escape(line))

    console.print(format_summary(outcome), soft_wrap=True)


def format_summary(outcome: TailoringOutcome) -> str:
    """Build the final SUCCEEDED/FAILED summary line (with Rich markup)."""
    prefix = "[DRY RUN] " if outcome.dry_run else ""
    env = ""
    if outcome.environment is not None:
        env = f" for environment '{outcome.environment.name}'"
    result = "[success]SUCCEEDED[/]" if outcome.succeeded else "[error]FAILED[/]"
    return f"\n{escape(prefix)}Tailoring npm module{escape(env)}: {result}"


def print_state(token: str) -> None:
    """Describe a persisted state token."""
    if token == NOT_TAILORED_TOKEN:
        msg = "The npm module has not been tailored for a specific runtime environment."
    elif token == UNDEFINED_TOKEN:
        msg = "The npm module is in an undefined state. Please re-install it."
    elif token not in state_tokens():
        msg = f"The npm module is in an unknown tailoring state '{escape(token)}'"
    else:
        msg = f"The npm module has been tailored for runtime environment: {escape(token)}"
    console.print(f"[bold_header]TAILORING STATE:[/] {msg}", soft_wrap=True)
