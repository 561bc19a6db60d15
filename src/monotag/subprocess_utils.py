"""Subprocess helpers that attach operation context to failures.

Every git invocation goes through an explicit argument vector, never a shell
string, so operator-supplied text (tag messages, commit refs) cannot change
command semantics.
"""

import logging
import os
import subprocess
from collections.abc import Mapping, Sequence
from pathlib import Path

logger = logging.getLogger(__name__)


def copied_env_for_git_subprocess() -> dict[str, str]:
    """Copy of the current environment with interactive git prompts disabled.

    GIT_TERMINAL_PROMPT=0 makes git fail fast on missing credentials instead of
    blocking on a username/password prompt.
    """
    env = os.environ.copy()
    env["GIT_TERMINAL_PROMPT"] = "0"
    return env


def format_command(cmd: Sequence[str]) -> str:
    """Render an argv list for log and error messages."""
    return " ".join(cmd)


def run_subprocess_with_context(
    *,
    cmd: Sequence[str],
    operation_context: str,
    cwd: Path,
    timeout: float | None = None,
    env: Mapping[str, str] | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run a command and raise RuntimeError with context if it fails.

    Args:
        cmd: Argument vector to execute
        operation_context: Human-readable description of what was attempted
            (e.g., "create tag '@web/1.0.0'")
        cwd: Working directory for the command
        timeout: Optional timeout in seconds
        env: Optional environment for the child process

    Returns:
        The completed process with captured text stdout/stderr

    Raises:
        RuntimeError: If the command exits nonzero, cannot be started, or
            exceeds the timeout. The message names the operation, the command
            and git's stderr.
    """
    logger.debug("running %s (cwd=%s)", format_command(cmd), cwd)
    try:
        return subprocess.run(
            list(cmd),
            cwd=cwd,
            capture_output=True,
            text=True,
            check=True,
            timeout=timeout,
            env=dict(env) if env is not None else None,
        )
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        message = f"Failed to {operation_context}\nCommand: {format_command(cmd)}"
        message += f"\nExit code: {e.returncode}"
        if stderr:
            message += f"\nstderr: {stderr}"
        raise RuntimeError(message) from e
    except subprocess.TimeoutExpired as e:
        raise RuntimeError(
            f"Failed to {operation_context}\nCommand: {format_command(cmd)}\n"
            f"Timed out after {e.timeout} seconds"
        ) from e
    except OSError as e:
        raise RuntimeError(
            f"Failed to {operation_context}\nCommand: {format_command(cmd)}\n{e}"
        ) from e
