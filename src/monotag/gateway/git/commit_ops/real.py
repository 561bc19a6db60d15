"""Production Git commit history queries using subprocess."""

import subprocess
from pathlib import Path

from monotag.gateway.git.commit_ops.abc import GitCommitOps
from monotag.gateway.git.commit_ops.types import CommitRecord
from monotag.subprocess_utils import run_subprocess_with_context


class RealGitCommitOps(GitCommitOps):
    """Real implementation of Git commit history queries using subprocess."""

    def get_head_commit(self, repo_root: Path) -> str | None:
        """Resolve HEAD to a full commit id."""
        try:
            result = subprocess.run(
                ["git", "rev-parse", "--verify", "--quiet", "HEAD"],
                cwd=repo_root,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError:
            # git binary missing or not executable
            return None
        if result.returncode != 0:
            return None
        return result.stdout.strip() or None

    def get_recent_commits(self, repo_root: Path, *, limit: int) -> list[CommitRecord]:
        """Get recent commit information."""
        if limit <= 0:
            return []

        # An unborn HEAD makes `git log` fail; treat it as empty history
        if self.get_head_commit(repo_root) is None:
            return []

        result = run_subprocess_with_context(
            cmd=["git", "log", f"-{limit}", "--format=%H%x00%h%x00%s"],
            operation_context=f"get recent {limit} commits",
            cwd=repo_root,
        )

        commits: list[CommitRecord] = []
        for line in result.stdout.split("\n"):
            if not line:
                continue
            parts = line.split("\x00")
            if len(parts) == 3:
                commits.append(CommitRecord(sha=parts[0], short_sha=parts[1], subject=parts[2]))
        return commits
