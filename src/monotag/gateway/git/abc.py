"""High-level git operations interface.

This module provides a clean abstraction over git subprocess calls, making the
codebase more testable and maintainable.

Architecture:
- Git: Abstract base class exposing the sub-gateways
- RealGit: Production implementation using subprocess
- FakeGit: In-memory implementation for tests
- DryRunGit: Wrapper that prints mutations instead of running them
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from monotag.gateway.git.commit_ops.abc import GitCommitOps
    from monotag.gateway.git.repo_ops.abc import GitRepoOps
    from monotag.gateway.git.tag_ops.abc import GitTagOps


class Git(ABC):
    """Abstract interface for git operations.

    All implementations (real and fake) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.
    """

    @property
    @abstractmethod
    def repo(self) -> GitRepoOps:
        """Access repository detection subgateway."""
        ...

    @property
    @abstractmethod
    def tag(self) -> GitTagOps:
        """Access tag operations subgateway."""
        ...

    @property
    @abstractmethod
    def commit(self) -> GitCommitOps:
        """Access commit history subgateway."""
        ...
