"""Fake Git implementation for testing.

FakeGit composes the fake sub-gateways and forwards constructor state to them,
so tests can describe a repository in one call:

    git = FakeGit(
        repository_roots={repo_root},
        local_tags={"@web/1.0.0"},
        remote_tags={"origin": {"@web/1.1.0"}},
    )
"""

from pathlib import Path

from monotag.gateway.git.abc import Git
from monotag.gateway.git.commit_ops.fake import FakeGitCommitOps
from monotag.gateway.git.commit_ops.types import CommitRecord
from monotag.gateway.git.repo_ops.fake import FakeGitRepoOps
from monotag.gateway.git.tag_ops.fake import FakeGitTagOps
from monotag.gateway.git.tag_ops.types import PushError


class FakeGit(Git):
    """In-memory fake implementation of git operations.

    Constructor Injection: all state is passed via constructor and forwarded
    to the sub-gateway fakes, which are also exposed with their concrete types
    (tag_ops, commit_ops) for mutation-tracking assertions.
    """

    def __init__(
        self,
        *,
        repository_roots: set[Path] | None = None,
        local_tags: set[str] | None = None,
        remote_tags: dict[str, set[str]] | None = None,
        list_remote_error: str | None = None,
        create_tag_error: str | None = None,
        push_tag_error: PushError | None = None,
        commits: list[CommitRecord] | None = None,
        log_error: str | None = None,
    ) -> None:
        self._repo = FakeGitRepoOps(repository_roots=repository_roots)
        self._tag = FakeGitTagOps(
            local_tags=local_tags,
            remote_tags=remote_tags,
            list_remote_error=list_remote_error,
            create_tag_error=create_tag_error,
            push_tag_error=push_tag_error,
        )
        self._commit = FakeGitCommitOps(commits=commits, log_error=log_error)

    @property
    def repo(self) -> FakeGitRepoOps:
        """Access repository detection subgateway."""
        return self._repo

    @property
    def tag(self) -> FakeGitTagOps:
        """Access tag operations subgateway."""
        return self._tag

    @property
    def commit(self) -> FakeGitCommitOps:
        """Access commit history subgateway."""
        return self._commit
