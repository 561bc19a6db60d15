"""Abstract base class for Git tag operations.

This sub-gateway holds tag queries (local and remote listings, existence)
and tag mutations (annotated creation, push).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from monotag.gateway.git.tag_ops.types import PushError, PushResult


class GitTagOps(ABC):
    """Abstract interface for Git tag operations.

    This interface contains both query and mutation operations for tags.
    All implementations (real, fake, dry-run) must implement this interface.
    """

    # ============================================================================
    # Query Operations
    # ============================================================================

    @abstractmethod
    def list_local_tags(self, repo_root: Path, pattern: str) -> list[str]:
        """List local tag names matching a glob pattern.

        Args:
            repo_root: Path to the repository root
            pattern: Glob understood by `git tag --list` (e.g., '@web/*')

        Returns:
            Tag names in git's output order

        Raises:
            RuntimeError: If git command fails
        """
        ...

    @abstractmethod
    def list_remote_tags(self, repo_root: Path, remote: str, pattern: str) -> list[str]:
        """List tag names on a remote matching a glob pattern.

        Names are returned without the 'refs/tags/' prefix and without the
        peeled '^{}' entries git prints for annotated tags.

        Args:
            repo_root: Path to the repository root
            remote: Remote name (e.g., 'origin')
            pattern: Glob matched against the tag name (e.g., '@web/*')

        Returns:
            Tag names on the remote

        Raises:
            RuntimeError: If the remote cannot be queried
        """
        ...

    @abstractmethod
    def tag_exists(self, repo_root: Path, tag_name: str) -> bool:
        """Check if a git tag exists locally.

        Args:
            repo_root: Path to the repository root
            tag_name: Tag name to check (e.g., '@web/1.0.0')

        Returns:
            True if the tag exists, False otherwise
        """
        ...

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    @abstractmethod
    def create_tag(self, repo_root: Path, tag_name: str, commit: str, message: str) -> None:
        """Create an annotated git tag pointing at a commit.

        Args:
            repo_root: Path to the repository root
            tag_name: Tag name to create (e.g., '@web/1.0.0')
            commit: Commit-ish the tag points at
            message: Tag message, passed verbatim

        Raises:
            RuntimeError: If git command fails (unknown commit, existing tag, ...)
        """
        ...

    @abstractmethod
    def push_tag(self, repo_root: Path, remote: str, tag_name: str) -> PushResult | PushError:
        """Push a tag to a remote.

        Args:
            repo_root: Path to the repository root
            remote: Remote name (e.g., 'origin')
            tag_name: Tag name to push

        Returns:
            PushResult on success, PushError with git's diagnostic on failure
        """
        ...
