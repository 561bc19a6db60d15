"""Fake implementation of Git tag operations for testing."""

from __future__ import annotations

from fnmatch import fnmatchcase
from pathlib import Path

from monotag.gateway.git.tag_ops.abc import GitTagOps
from monotag.gateway.git.tag_ops.types import PushError, PushResult


class FakeGitTagOps(GitTagOps):
    """In-memory fake implementation of Git tag operations.

    This fake accepts pre-configured state in its constructor and tracks
    mutations for test assertions.

    Constructor Injection:
    ---------------------
    - local_tags: Set of tag names that exist in the repository
    - remote_tags: Mapping of remote name -> set of tag names on that remote
    - list_remote_error: If set, list_remote_tags raises RuntimeError with it
    - create_tag_error: If set, create_tag raises RuntimeError with it
    - push_tag_error: If set, push_tag returns this PushError

    Mutation Tracking:
    -----------------
    This fake tracks mutations for test assertions via read-only properties:
    - created_tags: List of (tag_name, commit, message) tuples from create_tag()
    - pushed_tags: List of (remote, tag_name) tuples from successful push_tag()
    - push_attempts: Number of push_tag() calls, successful or not
    """

    def __init__(
        self,
        *,
        local_tags: set[str] | None = None,
        remote_tags: dict[str, set[str]] | None = None,
        list_remote_error: str | None = None,
        create_tag_error: str | None = None,
        push_tag_error: PushError | None = None,
    ) -> None:
        """Create FakeGitTagOps with pre-configured state.

        Args:
            local_tags: Set of tag names that exist locally
            remote_tags: Mapping of remote name -> tag names on that remote
            list_remote_error: Error message raised by list_remote_tags
            create_tag_error: Error message raised by create_tag
            push_tag_error: Error returned by push_tag
        """
        self._local_tags: set[str] = local_tags if local_tags is not None else set()
        self._remote_tags: dict[str, set[str]] = remote_tags if remote_tags is not None else {}
        self._list_remote_error = list_remote_error
        self._create_tag_error = create_tag_error
        self._push_tag_error = push_tag_error

        # Mutation tracking
        self._created_tags: list[tuple[str, str, str]] = []  # (tag_name, commit, message)
        self._pushed_tags: list[tuple[str, str]] = []  # (remote, tag_name)
        self._push_attempts = 0

    # ============================================================================
    # Query Operations
    # ============================================================================

    def list_local_tags(self, repo_root: Path, pattern: str) -> list[str]:
        """List configured local tags matching the glob."""
        return sorted(tag for tag in self._local_tags if fnmatchcase(tag, pattern))

    def list_remote_tags(self, repo_root: Path, remote: str, pattern: str) -> list[str]:
        """List configured remote tags matching the glob."""
        if self._list_remote_error is not None:
            raise RuntimeError(self._list_remote_error)
        tags = self._remote_tags.get(remote, set())
        return sorted(tag for tag in tags if fnmatchcase(tag, pattern))

    def tag_exists(self, repo_root: Path, tag_name: str) -> bool:
        """Check if a git tag exists in the fake local state."""
        return tag_name in self._local_tags

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    def create_tag(self, repo_root: Path, tag_name: str, commit: str, message: str) -> None:
        """Create an annotated git tag (mutates internal state).

        Mirrors git: a commit starting with "-" is an unknown ref, and an
        existing tag is never overwritten.
        """
        if self._create_tag_error is not None:
            raise RuntimeError(self._create_tag_error)
        if commit.startswith("-"):
            raise RuntimeError(f"fatal: Failed to resolve '{commit}' as a valid ref.")
        if tag_name in self._local_tags:
            raise RuntimeError(f"fatal: tag '{tag_name}' already exists")
        self._local_tags.add(tag_name)
        self._created_tags.append((tag_name, commit, message))

    def push_tag(self, repo_root: Path, remote: str, tag_name: str) -> PushResult | PushError:
        """Push a tag to a remote (tracks mutation)."""
        self._push_attempts += 1
        if self._push_tag_error is not None:
            return self._push_tag_error
        if tag_name not in self._local_tags:
            return PushError(message=f"error: src refspec refs/tags/{tag_name} does not match any")
        remote_tags = self._remote_tags.setdefault(remote, set())
        if tag_name in remote_tags:
            return PushResult(output="Everything up-to-date")
        remote_tags.add(tag_name)
        self._pushed_tags.append((remote, tag_name))
        return PushResult(output=f" * [new tag]         {tag_name} -> {tag_name}")

    # ============================================================================
    # Mutation Tracking Properties
    # ============================================================================

    @property
    def local_tags(self) -> set[str]:
        """Current local tag names (copy)."""
        return set(self._local_tags)

    @property
    def created_tags(self) -> list[tuple[str, str, str]]:
        """Get list of tags created during test.

        Returns list of (tag_name, commit, message) tuples.
        This property is for test assertions only.
        """
        return self._created_tags.copy()

    @property
    def pushed_tags(self) -> list[tuple[str, str]]:
        """Get list of tags pushed during test.

        Returns list of (remote, tag_name) tuples.
        This property is for test assertions only.
        """
        return self._pushed_tags.copy()

    @property
    def push_attempts(self) -> int:
        """Number of push_tag() calls, including failed ones."""
        return self._push_attempts
