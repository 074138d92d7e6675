"""Data models for pkgtailor.

This package contains the run options passed to the engine and the
outcome it reports back.
"""

from pkgtailor.models.options import Options, build_options
from pkgtailor.models.outcome import OutcomeStatus, TailoringOutcome

__all__ = [
    "Options",
    "OutcomeStatus",
    "TailoringOutcome",
    "build_options",
]
