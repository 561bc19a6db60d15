"""Output helpers separating human-facing and machine-readable output.

- user_output: status messages, warnings and prompts go to stderr
- machine_output: values meant for piping (versions, tag names) go to stdout
"""

import sys

import click


def user_output(message: str = "", *, nl: bool = True) -> None:
    """Write a human-facing message to stderr."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: str = "") -> None:
    """Write a machine-readable value to stdout."""
    click.echo(message)


def user_confirm(prompt: str, *, default: bool = False) -> bool:
    """Ask a yes/no question on stderr.

    stderr is flushed first so pending status lines appear before the prompt.
    """
    sys.stderr.flush()
    return click.confirm(prompt, default=default, err=True)
