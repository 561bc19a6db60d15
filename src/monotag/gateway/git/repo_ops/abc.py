"""Abstract interface for git repository detection."""

from abc import ABC, abstractmethod
from pathlib import Path


class GitRepoOps(ABC):
    """Abstract interface for Git repository detection.

    All implementations (real, fake) must implement this interface.
    """

    @abstractmethod
    def is_repository(self, root: Path) -> bool:
        """Check whether a directory is under git management.

        Never raises: inability to run git is reported as False.

        Args:
            root: Directory to check

        Returns:
            True if root holds a .git entry or git reports a work tree there
        """
        ...

    @abstractmethod
    def get_repository_root(self, cwd: Path) -> Path | None:
        """Get the top-level directory of the repository containing cwd.

        Args:
            cwd: Working directory to start search from

        Returns:
            Path to the repository root, or None if cwd is not inside a repository
        """
        ...
