"""Target runtime environment definitions.

Each environment keeps the native binaries built for exactly one Node.js
ABI version and drops everything else, along with all 32-bit binaries.
Binaries are named with a trailing ABI tag, e.g. ``addon_46.node``.
Classification is by file name only and never touches the filesystem.
"""

import re
from dataclasses import dataclass, field

# Files in a 'lib' or 'linux-x86-32' leaf directory are 32-bit binaries
THIRTY_TWO_BIT_PATH_PATTERN = re.compile(r"((/lib)|(/linux-x86-32))/[^/]+$")


@dataclass(frozen=True, slots=True)
class EnvironmentDefinition:
    """A runtime environment the npm module can be tailored for.

    Attributes:
        key: Command line value selecting this environment.
        name: Display name, also persisted as the tailoring state token.
        description: Help text for the command line.
        kept_abi_tag: Two-digit ABI tag of the binaries to preserve.
    """

    key: str
    name: str
    description: str
    kept_abi_tag: str
    _binary_pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate the ABI tag and derive the binary name pattern."""
        if len(self.kept_abi_tag) != 2 or not self.kept_abi_tag.isdigit():
            msg = f"ABI tag must be two digits, got '{self.kept_abi_tag}'"
            raise ValueError(msg)
        first, second = self.kept_abi_tag
        pattern = re.compile(rf"_({first}[^{second}]|[^{first}][0-9])\.node$")
        object.__setattr__(self, "_binary_pattern", pattern)

    def should_delete(self, path: str) -> bool:
        """Check whether a file is not needed in this environment.

        Args:
            path: Normalized (forward slash) file path.

        Returns:
            True if the file carries a foreign ABI tag or is a 32-bit binary.
        """
        if self._binary_pattern.search(path):
            return True
        return THIRTY_TWO_BIT_PATH_PATTERN.search(path) is not None


AWS_LAMBDA_NODE4 = EnvironmentDefinition(
    key="aws-lambda-v4",
    name="AWS Lambda with Node 4.x",
    description="Tailor for AWS Lambda with Node.js V4.x",
    kept_abi_tag="46",
)

AWS_LAMBDA_NODE6 = EnvironmentDefinition(
    key="aws-lambda-v6",
    name="AWS Lambda with Node 6.x",
    description="Tailor for AWS Lambda with Node.js V6.x",
    kept_abi_tag="48",
)

ENVIRONMENTS: tuple[EnvironmentDefinition, ...] = (AWS_LAMBDA_NODE4, AWS_LAMBDA_NODE6)


def get_environment(key: str) -> EnvironmentDefinition | None:
    """Look up an environment by its command line key."""
    for env in ENVIRONMENTS:
        if env.key == key:
            return env
    return None


def get_environment_by_name(name: str) -> EnvironmentDefinition | None:
    """Look up an environment by its display name (state token)."""
    for env in ENVIRONMENTS:
        if env.name == name:
            return env
    return None
