"""Create and push `@<namespace>/<version>` tags.

Creation and push are separate steps so a tag can stay local, and a failed
push can be retried without recreating the tag. Neither step raises: failures
come back as values and git's diagnostic is logged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from monotag.core.versioning import VersionTriple, format_tag_name
from monotag.gateway.git.abc import Git
from monotag.gateway.git.tag_ops.types import PushError

logger = logging.getLogger(__name__)

DEFAULT_PUSH_MESSAGE = "Push succeeded"


@dataclass(frozen=True)
class PushOutcome:
    """Result of pushing a tag.

    Attributes:
        success: Whether the remote accepted the tag
        message: git's output on success, the failure diagnostic otherwise
    """

    success: bool
    message: str


@dataclass(frozen=True)
class ReleaseOutcome:
    """Result of creating a tag and then pushing it.

    Attributes:
        tag_name: The tag that was (or would have been) created
        created: Whether the local tag was created
        push: Push result, or None when creation failed and no push was attempted
    """

    tag_name: str
    created: bool
    push: PushOutcome | None

    @property
    def success(self) -> bool:
        return self.created and self.push is not None and self.push.success


def create_tag(
    git: Git,
    repo_root: Path,
    namespace: str,
    version: VersionTriple,
    commit: str,
    message: str,
) -> bool:
    """Create the annotated tag '@<namespace>/<version>' at `commit`.

    Returns:
        True if the tag was created. False if repo_root is not a repository
        (nothing is attempted) or git refused: unknown commit, tag already
        exists, process failure.
    """
    tag_name = format_tag_name(namespace, version)

    if not git.repo.is_repository(repo_root):
        logger.error("Cannot create tag %s: %s is not a git repository", tag_name, repo_root)
        return False

    try:
        git.tag.create_tag(repo_root, tag_name, commit, message)
    except Exception as e:
        logger.error("Failed to create tag %s at %s: %s", tag_name, commit, e)
        return False

    logger.debug("created tag %s at %s", tag_name, commit)
    return True


def push_tag(
    git: Git, repo_root: Path, namespace: str, version: VersionTriple, *, remote: str
) -> PushOutcome:
    """Push the existing tag '@<namespace>/<version>' to `remote`.

    Pushing a tag the remote already has is reported by git as up to date,
    which counts as success; a conflicting tag of the same name on the remote
    is a failure with git's rejection text.
    """
    tag_name = format_tag_name(namespace, version)

    try:
        result = git.tag.push_tag(repo_root, remote, tag_name)
    except Exception as e:
        logger.error("Failed to push tag %s to %s: %s", tag_name, remote, e)
        return PushOutcome(success=False, message=str(e))

    if isinstance(result, PushError):
        logger.error("Failed to push tag %s to %s: %s", tag_name, remote, result.message)
        return PushOutcome(success=False, message=result.message)

    return PushOutcome(success=True, message=result.output or DEFAULT_PUSH_MESSAGE)


def create_and_push_tag(
    git: Git,
    repo_root: Path,
    namespace: str,
    version: VersionTriple,
    commit: str,
    message: str,
    *,
    remote: str,
) -> ReleaseOutcome:
    """Create the tag, then push it only if creation succeeded."""
    tag_name = format_tag_name(namespace, version)

    if not create_tag(git, repo_root, namespace, version, commit, message):
        return ReleaseOutcome(tag_name=tag_name, created=False, push=None)

    push = push_tag(git, repo_root, namespace, version, remote=remote)
    return ReleaseOutcome(tag_name=tag_name, created=True, push=push)
