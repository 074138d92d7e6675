"""Shared types for CLI commands."""

from enum import Enum


class EnvironmentChoice(str, Enum):
    """Runtime environments selectable on the command line.

    Values are the keys of the registered environment definitions.
    """

    AWS_LAMBDA_V4 = "aws-lambda-v4"
    AWS_LAMBDA_V6 = "aws-lambda-v6"
