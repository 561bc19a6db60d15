"""CLI precondition checks that exit with a user-friendly error."""

from __future__ import annotations

from typing import NoReturn, TypeVar

import click

from monotag.output import user_output

T = TypeVar("T")


def fail(message: str) -> NoReturn:
    """Print a red 'Error:' line and exit with status 1."""
    user_output(click.style("Error: ", fg="red") + message)
    raise SystemExit(1)


class Ensure:
    """Helper class for CLI invariant checks."""

    @staticmethod
    def invariant(condition: bool, message: str) -> None:
        """Exit with `message` unless condition holds."""
        if not condition:
            fail(message)

    @staticmethod
    def truthy(value: T | None, message: str) -> T:
        """Return value, or exit with `message` if it is falsy (None, '', [])."""
        if not value:
            fail(message)
        return value

    @staticmethod
    def not_none(value: T | None, message: str) -> T:
        """Return value, or exit with `message` if it is None."""
        if value is None:
            fail(message)
        return value

    @staticmethod
    def ideal_state(result: T, error_types: tuple[type, ...]) -> T:
        """Return result unless it is one of the given non-ideal state types.

        Non-ideal states carry a `message` property, which is printed.

        Example:
            >>> apps = Ensure.ideal_state(discover_apps(...), (AppsDirNotFound,))
        """
        if isinstance(result, error_types):
            fail(result.message)  # type: ignore[attr-defined]
        return result
