"""Shared context builders for test scenarios.

These builders encapsulate the common pattern of setting up a MonotagContext
around a FakeGit and an on-disk monorepo layout under tmp_path.
"""

from pathlib import Path

from monotag.core.context import MonotagContext
from monotag.gateway.git.commit_ops.types import CommitRecord
from monotag.gateway.git.dry_run import DryRunGit
from monotag.gateway.git.fake import FakeGit


def make_commit(index: int, subject: str) -> CommitRecord:
    """Build a CommitRecord with a deterministic id derived from index."""
    sha = f"{index:040x}"
    return CommitRecord(sha=sha, short_sha=sha[:7], subject=subject)


def make_monorepo(root: Path, apps: list[str], *, marker: str = "package.json") -> Path:
    """Create `root/apps/<app>/<marker>` for each app and return root."""
    for app in apps:
        app_dir = root / "apps" / app
        app_dir.mkdir(parents=True, exist_ok=True)
        (app_dir / marker).write_text("{}\n", encoding="utf-8")
    return root


def build_test_context(git: FakeGit, cwd: Path, *, dry_run: bool = False) -> MonotagContext:
    """Build MonotagContext for command tests.

    Args:
        git: FakeGit describing the repository
        cwd: Directory the command runs from
        dry_run: Whether to wrap git with DryRunGit

    Example:
        >>> git = FakeGit(repository_roots={tmp_path})
        >>> ctx = build_test_context(git, tmp_path)
        >>> result = runner.invoke(cli, ["latest", "web"], obj=ctx)
    """
    return MonotagContext(
        git=DryRunGit(git) if dry_run else git,
        cwd=cwd,
        dry_run=dry_run,
    )
