"""Interactive prompts for the tag workflow.

All prompts write to stderr so stdout stays reserved for machine output.
Ctrl-C or end of input raises click.Abort, which ends the workflow before any
further git mutation.
"""

from __future__ import annotations

import click

from monotag.core.app_discovery import AppInfo
from monotag.core.commits import CommitReference
from monotag.core.versioning import (
    INCREMENT_CLASSES,
    IncrementClass,
    InvalidVersion,
    VersionTriple,
    increment_version,
    validate_version_input,
)
from monotag.output import user_confirm, user_output


def _pick_from_list(prompt: str, labels: list[str], *, default: int) -> int:
    """Show a numbered list and return the chosen zero-based index."""
    for index, label in enumerate(labels, start=1):
        user_output(f"  {index:>2}. {label}")
    choice = click.prompt(
        prompt, type=click.IntRange(1, len(labels)), default=default, err=True
    )
    return choice - 1


def select_app(apps: list[AppInfo]) -> AppInfo:
    """Ask which app to tag."""
    user_output("Apps:")
    index = _pick_from_list("Select app", [app.name for app in apps], default=1)
    return apps[index]


def select_increment(latest: VersionTriple) -> IncrementClass:
    """Ask which version component to bump, previewing each result."""
    user_output("Version bump:")
    labels = [
        f"{increment:<5}  {latest} -> {increment_version(latest, increment)}"
        for increment in INCREMENT_CLASSES
    ]
    index = _pick_from_list("Select bump", labels, default=INCREMENT_CLASSES.index("patch") + 1)
    return INCREMENT_CLASSES[index]


def _parse_version_answer(text: str) -> VersionTriple:
    result = validate_version_input(text.strip())
    if isinstance(result, InvalidVersion):
        raise click.BadParameter(result.message)
    return result


def confirm_version(suggested: VersionTriple) -> VersionTriple:
    """Let the operator accept or edit the suggested version.

    Re-prompts until the answer is MAJOR.MINOR.PATCH.
    """
    return click.prompt(
        "Version",
        default=str(suggested),
        value_proc=_parse_version_answer,
        err=True,
    )


CUSTOM_COMMIT_LABEL = "Enter a commit id"


def select_commit(commits: list[CommitReference]) -> str:
    """Ask which commit to tag: a recent one, or any commit-ish typed in."""
    if not commits:
        return _input_commit_ref()

    user_output("Recent commits:")
    labels = [f"{commit.short_sha}  {commit.display_text()}" for commit in commits]
    labels.append(CUSTOM_COMMIT_LABEL)
    index = _pick_from_list("Select commit", labels, default=1)
    if index == len(commits):
        return _input_commit_ref()
    return commits[index].sha


def _require_text(text: str) -> str:
    if not text.strip():
        raise click.BadParameter("must not be empty")
    return text.strip()


def _input_commit_ref() -> str:
    return click.prompt("Commit id", value_proc=_require_text, err=True)


def input_tag_message(default: str) -> str:
    """Ask for the annotated tag message; blank answers are rejected."""
    return click.prompt("Tag message", default=default, value_proc=_require_text, err=True)


def confirm_push(tag_name: str, remote: str) -> bool:
    """Ask whether to push the new tag."""
    return user_confirm(f"Push {tag_name} to {remote}?", default=True)
