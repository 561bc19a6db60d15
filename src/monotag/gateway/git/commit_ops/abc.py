"""Abstract base class for Git commit history queries."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from monotag.gateway.git.commit_ops.types import CommitRecord


class GitCommitOps(ABC):
    """Abstract interface for Git commit history queries.

    All implementations (real, fake) must implement this interface.
    """

    @abstractmethod
    def get_head_commit(self, repo_root: Path) -> str | None:
        """Get the full id of the commit HEAD points at.

        Args:
            repo_root: Path to the repository root

        Returns:
            Full commit id, or None if HEAD does not resolve (e.g., empty repository)
        """
        ...

    @abstractmethod
    def get_recent_commits(self, repo_root: Path, *, limit: int) -> list[CommitRecord]:
        """Get recent commits reachable from HEAD, newest first.

        Args:
            repo_root: Path to the repository root
            limit: Maximum number of commits to return

        Returns:
            Up to `limit` commit records

        Raises:
            RuntimeError: If git command fails
        """
        ...
