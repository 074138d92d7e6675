"""Run options for a tailoring invocation."""

from dataclasses import dataclass
from pathlib import Path

from pkgtailor.core.environments import EnvironmentDefinition, get_environment
from pkgtailor.core.paths import get_default_module_dir


@dataclass(frozen=True, slots=True)
class Options:
    """Immutable configuration of one tailoring run.

    Attributes:
        environment: Target environment, None if not selected.
        dry_run: Report candidate files without deleting them.
        module_dir: Installed npm module directory.
    """

    environment: EnvironmentDefinition | None
    dry_run: bool
    module_dir: Path


def build_options(
    environment_key: str | None = None,
    *,
    dry_run: bool = False,
    module_dir: Path | None = None,
) -> Options:
    """Build run options from parsed command line values.

    Args:
        environment_key: Key of the selected environment, if any.
        dry_run: Whether to perform a dry run.
        module_dir: Module directory. Defaults to PKGTAILOR_MODULE_DIR or cwd.

    Returns:
        The Options for this run.

    Raises:
        ValueError: If the environment key is not registered.
    """
    environment = None
    if environment_key is not None:
        environment = get_environment(environment_key)
        if environment is None:
            msg = f"Unknown environment: {environment_key}"
            raise ValueError(msg)

    return Options(
        environment=environment,
        dry_run=dry_run,
        module_dir=module_dir if module_dir is not None else get_default_module_dir(),
    )
