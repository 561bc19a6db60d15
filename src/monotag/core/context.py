"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from monotag.gateway.git.abc import Git
from monotag.gateway.git.dry_run import DryRunGit
from monotag.gateway.git.real import RealGit


@dataclass(frozen=True)
class MonotagContext:
    """Immutable context holding all dependencies for monotag operations.

    Created at CLI entry point and threaded through the application.
    Tests build one directly with a FakeGit.
    """

    git: Git
    cwd: Path
    dry_run: bool


def create_context(*, dry_run: bool) -> MonotagContext:
    """Create production context with real implementations.

    Args:
        dry_run: If True, wrap git with DryRunGit so tag mutations are printed
            instead of executed
    """
    git: Git = RealGit()
    if dry_run:
        git = DryRunGit(git)
    return MonotagContext(git=git, cwd=Path.cwd(), dry_run=dry_run)
