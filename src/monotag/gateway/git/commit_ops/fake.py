"""Fake implementation of Git commit history queries for testing."""

from pathlib import Path

from monotag.gateway.git.commit_ops.abc import GitCommitOps
from monotag.gateway.git.commit_ops.types import CommitRecord


class FakeGitCommitOps(GitCommitOps):
    """In-memory fake implementation for testing.

    Constructor Injection:
    ---------------------
    - commits: History newest first; the first entry is HEAD
    - log_error: If set, get_recent_commits raises RuntimeError with it
    """

    def __init__(
        self,
        *,
        commits: list[CommitRecord] | None = None,
        log_error: str | None = None,
    ) -> None:
        self._commits: list[CommitRecord] = commits if commits is not None else []
        self._log_error = log_error

    def get_head_commit(self, repo_root: Path) -> str | None:
        if not self._commits:
            return None
        return self._commits[0].sha

    def get_recent_commits(self, repo_root: Path, *, limit: int) -> list[CommitRecord]:
        if self._log_error is not None:
            raise RuntimeError(self._log_error)
        return self._commits[: max(limit, 0)]
