"""Fake implementation of git repository detection for testing."""

from pathlib import Path

from monotag.gateway.git.repo_ops.abc import GitRepoOps


class FakeGitRepoOps(GitRepoOps):
    """In-memory fake implementation for testing.

    Constructor Injection: pre-configured state passed via constructor.
    """

    def __init__(self, *, repository_roots: set[Path] | None = None) -> None:
        """Create FakeGitRepoOps with pre-configured state.

        Args:
            repository_roots: Directories that count as repositories
        """
        self._repository_roots: set[Path] = (
            repository_roots if repository_roots is not None else set()
        )

    def is_repository(self, root: Path) -> bool:
        """Check membership in the configured repository roots."""
        return root in self._repository_roots

    def get_repository_root(self, cwd: Path) -> Path | None:
        """Return the deepest configured root containing cwd."""
        matches = [root for root in self._repository_roots if cwd.is_relative_to(root)]
        if not matches:
            return None
        return max(matches, key=lambda root: len(root.parts))
