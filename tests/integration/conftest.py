"""Shared helpers for integration tests that run real git."""

import subprocess
from pathlib import Path


def _git(cwd: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args], cwd=cwd, capture_output=True, text=True, check=True
    )
    return result.stdout


def init_git_repo(repo: Path, branch: str) -> None:
    """Initialize a repository on `branch` with one commit and local identity."""
    _git(repo, "init", "-b", branch)
    _git(repo, "config", "user.email", "test@example.com")
    _git(repo, "config", "user.name", "Test User")
    _git(repo, "config", "commit.gpgsign", "false")
    _git(repo, "config", "tag.gpgsign", "false")
    (repo / "README.md").write_text("# monorepo\n", encoding="utf-8")
    _git(repo, "add", "README.md")
    _git(repo, "commit", "-m", "chore: initial commit")


def add_commit(repo: Path, filename: str, message: str) -> str:
    """Commit a new file and return the full commit id."""
    (repo / filename).write_text(f"{filename}\n", encoding="utf-8")
    _git(repo, "add", filename)
    _git(repo, "commit", "-m", message)
    return _git(repo, "rev-parse", "HEAD").strip()


def init_bare_origin(repo: Path, origin: Path) -> None:
    """Create a bare repository at `origin` and register it as remote 'origin'."""
    subprocess.run(
        ["git", "init", "--bare", str(origin)], capture_output=True, text=True, check=True
    )
    _git(repo, "remote", "add", "origin", str(origin))


def list_tags(repo: Path) -> list[str]:
    return _git(repo, "tag", "--list").split()
