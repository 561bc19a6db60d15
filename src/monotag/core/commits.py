"""Recent commit history for the commit picker."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from monotag.gateway.git.abc import Git

logger = logging.getLogger(__name__)

DEFAULT_DISPLAY_LENGTH = 50

# "feat(billing): add invoices" -> scope "billing", message "add invoices"
_CONVENTIONAL_SUBJECT_RE = re.compile(r"^[a-z]+\(([^)]+)\):\s*(.+)$")


@dataclass(frozen=True)
class ConventionalSubject:
    """Scope and message split out of a `type(scope): message` subject."""

    scope: str
    message: str


@dataclass(frozen=True)
class CommitReference:
    """A commit offered to the operator.

    Attributes:
        sha: Full commit id
        short_sha: Abbreviated commit id
        subject: Raw subject line
        scope: Conventional-commit scope, or "" when the subject has none
        message: Subject without the `type(scope):` header
    """

    sha: str
    short_sha: str
    subject: str
    scope: str
    message: str

    def display_text(self, max_length: int = DEFAULT_DISPLAY_LENGTH) -> str:
        """'(scope): message', truncated with '...' beyond max_length."""
        text = f"({self.scope}): {self.message}" if self.scope else self.message
        if len(text) > max_length:
            return text[: max_length - 3] + "..."
        return text


def parse_commit_subject(subject: str) -> ConventionalSubject | None:
    """Split a conventional-commit subject, or None if it has no scope."""
    match = _CONVENTIONAL_SUBJECT_RE.match(subject)
    if match is None:
        return None
    return ConventionalSubject(scope=match.group(1), message=match.group(2))


def get_recent_commits(git: Git, repo_root: Path, count: int) -> list[CommitReference]:
    """Up to `count` commits reachable from HEAD, newest first.

    Returns an empty list when repo_root is not a repository, history is
    empty, or git fails.
    """
    if not git.repo.is_repository(repo_root):
        logger.warning("%s is not a git repository; no commits to show", repo_root)
        return []

    try:
        records = git.commit.get_recent_commits(repo_root, limit=count)
    except Exception:
        logger.exception("Failed to read recent commits in %s", repo_root)
        return []

    commits: list[CommitReference] = []
    for record in records[:count]:
        parsed = parse_commit_subject(record.subject)
        commits.append(
            CommitReference(
                sha=record.sha,
                short_sha=record.short_sha,
                subject=record.subject,
                scope=parsed.scope if parsed is not None else "",
                message=parsed.message if parsed is not None else record.subject,
            )
        )
    return commits


def get_latest_commit_id(git: Git, repo_root: Path) -> str | None:
    """Full id of HEAD, or None outside a repository or before the first commit."""
    if not git.repo.is_repository(repo_root):
        logger.warning("%s is not a git repository; no HEAD commit", repo_root)
        return None

    try:
        return git.commit.get_head_commit(repo_root)
    except Exception:
        logger.exception("Failed to read HEAD in %s", repo_root)
        return None
