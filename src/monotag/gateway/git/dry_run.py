"""No-op Git wrapper for dry-run mode.

This module provides a Git wrapper that prevents execution of destructive
operations while delegating read-only operations to the wrapped implementation.
"""

from monotag.gateway.git.abc import Git
from monotag.gateway.git.commit_ops.abc import GitCommitOps
from monotag.gateway.git.repo_ops.abc import GitRepoOps
from monotag.gateway.git.tag_ops.abc import GitTagOps
from monotag.gateway.git.tag_ops.dry_run import DryRunGitTagOps


class DryRunGit(Git):
    """No-op wrapper that prevents execution of destructive operations.

    Only tag operations mutate the repository, so only the tag subgateway is
    wrapped; repository detection and history queries pass straight through.

    Usage:
        real_ops = RealGit()
        noop_ops = DryRunGit(real_ops)

        # Prints "[DRY RUN] Would run: git tag -a ..." instead of tagging
        noop_ops.tag.create_tag(repo_root, "@web/1.0.0", "HEAD", "Release")
    """

    def __init__(self, wrapped: Git) -> None:
        """Create a dry-run wrapper around a Git implementation.

        Args:
            wrapped: The Git implementation to wrap (usually RealGit or FakeGit)
        """
        self._wrapped = wrapped
        self._tag = DryRunGitTagOps(wrapped.tag)

    @property
    def repo(self) -> GitRepoOps:
        """Access repository detection subgateway (read-only, delegated)."""
        return self._wrapped.repo

    @property
    def tag(self) -> GitTagOps:
        """Access tag operations subgateway (wrapped with DryRunGitTagOps)."""
        return self._tag

    @property
    def commit(self) -> GitCommitOps:
        """Access commit history subgateway (read-only, delegated)."""
        return self._wrapped.commit
