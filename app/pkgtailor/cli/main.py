"""Main CLI application entry point.

Defines the Typer application. Handlers return exit codes; only the
command function itself terminates the process.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from pkgtailor import __version__
from pkgtailor.cli.display import (
    print_deleting,
    print_outcome,
    print_state,
    print_tailoring_header,
)
from pkgtailor.cli.types import EnvironmentChoice
from pkgtailor.core.engine import TailoringEngine
from pkgtailor.core.errors import StateAccessError
from pkgtailor.core.paths import get_state_path
from pkgtailor.core.state import StateStore
from pkgtailor.models.options import Options, build_options
from pkgtailor.utils.formatting import configure_logging, print_error

HELP = """Tailor the @dynatrace/oneagent npm module for a specific runtime environment.

The module (to be precise, its dependency @dynatrace/oneagent-dependency)
ships native binaries for every Node.js version supported by Dynatrace.
Runtime environments such as AWS Lambda support very specific Node.js
versions only, so binaries for all other versions can be deleted. This
reduces the deployment package size significantly (e.g. to stay below
the AWS Lambda upload limit).
"""

app = typer.Typer(
    name="pkgtailor",
    help=HELP,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"pkgtailor version {__version__}")
        raise typer.Exit()


def show_state(module_dir: Path) -> int:
    """Print the persisted tailoring state.

    Args:
        module_dir: Installed npm module directory.

    Returns:
        Exit code: 0 if the state could be read, 1 otherwise.
    """
    store = StateStore(get_state_path(module_dir))
    try:
        token = store.read_token()
    except StateAccessError as e:
        print_error(escape(str(e)))
        return 1

    print_state(token)
    return 0


def tailor(options: Options) -> int:
    """Run the tailoring engine and print its outcome.

    Args:
        options: Run options.

    Returns:
        Exit code: 0 if the run succeeded (or was a no-op), 1 otherwise.
    """
    print_tailoring_header(options)
    engine = TailoringEngine(on_delete=print_deleting)
    outcome = engine.run(options)
    print_outcome(outcome)
    return 0 if outcome.succeeded else 1


@app.command(help=HELP)
def main(
    ctx: typer.Context,
    environment: Annotated[
        EnvironmentChoice | None,
        typer.Option(
            "--env",
            "-e",
            help="Target runtime environment (last one wins if repeated).",
            case_sensitive=False,
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Print files which would be deleted and exit."),
    ] = False,
    state: Annotated[
        bool,
        typer.Option("--state", help="Print the current tailoring state and exit."),
    ] = False,
    module_dir: Annotated[
        Path | None,
        typer.Option(
            "--module-dir",
            "-m",
            help="Installed npm module directory [default: $PKGTAILOR_MODULE_DIR or cwd].",
            file_okay=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    if environment is None and not (dry_run or state or verbose) and module_dir is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    configure_logging(verbose)
    options = build_options(
        environment.value if environment is not None else None,
        dry_run=dry_run,
        module_dir=module_dir,
    )

    if state:
        raise typer.Exit(code=show_state(options.module_dir))

    raise typer.Exit(code=tailor(options))


if __name__ == "__main__":
    app()
