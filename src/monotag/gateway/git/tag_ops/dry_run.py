"""Tag operations for `--dry-run`: listing is real, creating and pushing are printed."""

import shlex
from pathlib import Path

from monotag.gateway.git.tag_ops.abc import GitTagOps
from monotag.gateway.git.tag_ops.real import create_tag_command
from monotag.gateway.git.tag_ops.types import PushError, PushResult
from monotag.output import user_output


class DryRunGitTagOps(GitTagOps):
    """Wraps another GitTagOps and reports the git commands a release would run.

    Version resolution still sees the wrapped implementation's tags, so a dry
    run previews the exact tag name a real run would create.
    """

    def __init__(self, wrapped: GitTagOps) -> None:
        self._wrapped = wrapped

    def list_local_tags(self, repo_root: Path, pattern: str) -> list[str]:
        return self._wrapped.list_local_tags(repo_root, pattern)

    def list_remote_tags(self, repo_root: Path, remote: str, pattern: str) -> list[str]:
        return self._wrapped.list_remote_tags(repo_root, remote, pattern)

    def tag_exists(self, repo_root: Path, tag_name: str) -> bool:
        return self._wrapped.tag_exists(repo_root, tag_name)

    def create_tag(self, repo_root: Path, tag_name: str, commit: str, message: str) -> None:
        self._announce(create_tag_command(tag_name, commit, message))

    def push_tag(self, repo_root: Path, remote: str, tag_name: str) -> PushResult | PushError:
        self._announce(["git", "push", remote, f"refs/tags/{tag_name}"])
        return PushResult(output="")

    def _announce(self, cmd: list[str]) -> None:
        user_output(f"[DRY RUN] Would run: {shlex.join(cmd)}")
