"""Production Git implementation using subprocess."""

from monotag.gateway.git.abc import Git
from monotag.gateway.git.commit_ops.abc import GitCommitOps
from monotag.gateway.git.commit_ops.real import RealGitCommitOps
from monotag.gateway.git.repo_ops.abc import GitRepoOps
from monotag.gateway.git.repo_ops.real import RealGitRepoOps
from monotag.gateway.git.tag_ops.abc import GitTagOps
from monotag.gateway.git.tag_ops.real import RealGitTagOps


class RealGit(Git):
    """Production implementation using subprocess.

    All git operations execute actual git commands via subprocess.
    """

    def __init__(self) -> None:
        self._repo = RealGitRepoOps()
        self._tag = RealGitTagOps()
        self._commit = RealGitCommitOps()

    @property
    def repo(self) -> GitRepoOps:
        """Access repository detection subgateway."""
        return self._repo

    @property
    def tag(self) -> GitTagOps:
        """Access tag operations subgateway."""
        return self._tag

    @property
    def commit(self) -> GitCommitOps:
        """Access commit history subgateway."""
        return self._commit
