"""Production Git tag operations using subprocess."""

import subprocess
from pathlib import Path

from monotag.gateway.git.tag_ops.abc import GitTagOps
from monotag.gateway.git.tag_ops.types import PushError, PushResult
from monotag.subprocess_utils import copied_env_for_git_subprocess, run_subprocess_with_context

# Timeout in seconds for network-touching git operations (ls-remote, push).
# Prevents indefinite hangs on network issues or credential prompts.
_GIT_NETWORK_TIMEOUT = 120

_TAG_REF_PREFIX = "refs/tags/"
_PEELED_SUFFIX = "^{}"


def create_tag_command(tag_name: str, commit: str, message: str) -> list[str]:
    """argv for creating an annotated tag.

    The tag name and commit come after --end-of-options so a value starting
    with "-" is read as a ref, never as a flag such as -f.
    """
    return ["git", "tag", "-a", "-m", message, "--end-of-options", tag_name, commit]


def parse_ls_remote_tags(output: str) -> list[str]:
    """Extract tag names from `git ls-remote --tags` output.

    Each line is '<sha>\\t<ref>'. Annotated tags appear twice, once peeled
    with a '^{}' suffix; both collapse to the same name.
    """
    names: list[str] = []
    seen: set[str] = set()
    for line in output.splitlines():
        parts = line.split("\t", 1)
        if len(parts) != 2:
            continue
        ref = parts[1].strip()
        if not ref.startswith(_TAG_REF_PREFIX):
            continue
        name = ref.removeprefix(_TAG_REF_PREFIX).removesuffix(_PEELED_SUFFIX)
        if name and name not in seen:
            seen.add(name)
            names.append(name)
    return names


class RealGitTagOps(GitTagOps):
    """Production implementation of Git tag operations using subprocess."""

    # ============================================================================
    # Query Operations
    # ============================================================================

    def list_local_tags(self, repo_root: Path, pattern: str) -> list[str]:
        """List local tags matching a glob."""
        result = run_subprocess_with_context(
            cmd=["git", "tag", "--list", pattern],
            operation_context=f"list local tags matching '{pattern}'",
            cwd=repo_root,
        )
        return [line.strip() for line in result.stdout.splitlines() if line.strip()]

    def list_remote_tags(self, repo_root: Path, remote: str, pattern: str) -> list[str]:
        """List remote tags matching a glob via ls-remote."""
        result = run_subprocess_with_context(
            cmd=["git", "ls-remote", "--tags", remote, f"{_TAG_REF_PREFIX}{pattern}"],
            operation_context=f"list tags matching '{pattern}' on remote '{remote}'",
            cwd=repo_root,
            timeout=_GIT_NETWORK_TIMEOUT,
            env=copied_env_for_git_subprocess(),
        )
        return parse_ls_remote_tags(result.stdout)

    def tag_exists(self, repo_root: Path, tag_name: str) -> bool:
        """Check if a git tag exists."""
        try:
            result = subprocess.run(
                ["git", "rev-parse", "--verify", "--quiet", f"{_TAG_REF_PREFIX}{tag_name}"],
                cwd=repo_root,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError:
            # git binary missing or not executable
            return False
        return result.returncode == 0

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    def create_tag(self, repo_root: Path, tag_name: str, commit: str, message: str) -> None:
        """Create an annotated git tag."""
        run_subprocess_with_context(
            cmd=create_tag_command(tag_name, commit, message),
            operation_context=f"create tag '{tag_name}' at '{commit}'",
            cwd=repo_root,
        )

    def push_tag(self, repo_root: Path, remote: str, tag_name: str) -> PushResult | PushError:
        """Push a tag to a remote."""
        try:
            result = run_subprocess_with_context(
                cmd=["git", "push", remote, f"{_TAG_REF_PREFIX}{tag_name}"],
                operation_context=f"push tag '{tag_name}' to remote '{remote}'",
                cwd=repo_root,
                timeout=_GIT_NETWORK_TIMEOUT,
                env=copied_env_for_git_subprocess(),
            )
        except RuntimeError as e:
            return PushError(message=str(e))
        # git push reports progress on stderr
        output = "\n".join(part.strip() for part in (result.stdout, result.stderr) if part.strip())
        return PushResult(output=output)
