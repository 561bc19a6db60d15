"""Real implementation of git repository detection."""

import subprocess
from pathlib import Path

from monotag.gateway.git.repo_ops.abc import GitRepoOps


class RealGitRepoOps(GitRepoOps):
    """Real implementation of Git repository detection using subprocess."""

    def is_repository(self, root: Path) -> bool:
        """Check for a .git entry first, then ask git."""
        # .git is a directory in a normal clone and a file in a linked worktree
        if (root / ".git").exists():
            return True

        if not root.is_dir():
            return False

        try:
            result = subprocess.run(
                ["git", "rev-parse", "--is-inside-work-tree"],
                cwd=root,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError:
            # git binary missing or not executable
            return False
        return result.returncode == 0

    def get_repository_root(self, cwd: Path) -> Path | None:
        """Get the repository root via `git rev-parse --show-toplevel`."""
        try:
            result = subprocess.run(
                ["git", "rev-parse", "--show-toplevel"],
                cwd=cwd,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError:
            return None
        if result.returncode != 0:
            return None
        return Path(result.stdout.strip())
