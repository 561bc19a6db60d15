"""Discriminated union types for Git tag operations.

PushResult | PushError follows the non-ideal-state pattern: the error side
carries a message and an error_type instead of raising.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PushResult:
    """Success result from pushing a tag to a remote.

    Attributes:
        output: Informational text git printed (usually on stderr)
    """

    output: str


@dataclass(frozen=True)
class PushError:
    """Error result from pushing a tag to a remote. Implements NonIdealState."""

    message: str

    @property
    def error_type(self) -> str:
        return "push-failed"
