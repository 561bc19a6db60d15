"""Resolve the latest released version of a monorepo app from its tags.

Local and remote tags are merged so two operators with different local tag
caches compute the same latest version. Resolution never raises: a missing
repository or an unreachable remote is reported on the returned
VersionResolution and the version falls back to 0.0.0 or to local tags only.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from monotag.core.versioning import VersionTriple, parse_tag_version, tag_prefix
from monotag.gateway.git.abc import Git

logger = logging.getLogger(__name__)

TagSource = Literal["local", "remote"]


@dataclass(frozen=True)
class TagRecord:
    """A parsed tag seen during one resolution."""

    namespace: str
    version: VersionTriple
    source: TagSource


@dataclass(frozen=True)
class VersionResolution:
    """Outcome of resolving the latest version of a namespace.

    Attributes:
        namespace: The app namespace that was resolved
        version: Highest version found, or 0.0.0 when there is none
        is_repository: False if repo_root is not a git repository
        remote_error: Diagnostic from the remote listing, None if it succeeded
        tag_count: Number of distinct valid tags considered
    """

    namespace: str
    version: VersionTriple
    is_repository: bool
    remote_error: str | None
    tag_count: int

    @property
    def has_tags(self) -> bool:
        return self.tag_count > 0


def collect_tag_records(
    namespace: str, *, local_tags: list[str], remote_tags: list[str]
) -> list[TagRecord]:
    """Parse and de-duplicate tag names from both sources.

    A tag present locally and remotely is kept once, as the local record.
    Names that are malformed or belong to another namespace are dropped.
    """
    records: list[TagRecord] = []
    seen: set[str] = set()
    sources: list[tuple[TagSource, list[str]]] = [("local", local_tags), ("remote", remote_tags)]
    for source, names in sources:
        for name in names:
            if name in seen:
                continue
            seen.add(name)
            version = parse_tag_version(name, namespace)
            if version is None:
                logger.debug("ignoring tag %r: not a version of %r", name, namespace)
                continue
            records.append(TagRecord(namespace=namespace, version=version, source=source))
    return records


def select_latest(records: list[TagRecord]) -> VersionTriple:
    """Highest version among records, or 0.0.0 when there are none."""
    if not records:
        return VersionTriple.zero()
    return max(record.version for record in records)


def resolve_latest_version(
    git: Git, repo_root: Path, namespace: str, *, remote: str
) -> VersionResolution:
    """Find the highest `@<namespace>/X.Y.Z` tag locally or on `remote`.

    Args:
        git: Git gateway
        repo_root: Repository to inspect
        namespace: App namespace (e.g., 'billing')
        remote: Remote to query with ls-remote (e.g., 'origin')

    Returns:
        VersionResolution; version is 0.0.0 when nothing usable is found
    """
    if not git.repo.is_repository(repo_root):
        logger.warning("%s is not a git repository; using version 0.0.0", repo_root)
        return VersionResolution(
            namespace=namespace,
            version=VersionTriple.zero(),
            is_repository=False,
            remote_error=None,
            tag_count=0,
        )

    pattern = f"{tag_prefix(namespace)}*"

    try:
        local_tags = git.tag.list_local_tags(repo_root, pattern)
    except Exception:
        logger.exception("Failed to list local tags for %r; using version 0.0.0", namespace)
        return VersionResolution(
            namespace=namespace,
            version=VersionTriple.zero(),
            is_repository=True,
            remote_error=None,
            tag_count=0,
        )

    remote_error: str | None = None
    try:
        remote_tags = git.tag.list_remote_tags(repo_root, remote, pattern)
    except Exception as e:
        logger.warning("Failed to list tags on remote %r: %s", remote, e)
        remote_error = str(e)
        remote_tags = []

    logger.debug("local tags for %r: %s", namespace, local_tags)
    logger.debug("remote tags for %r: %s", namespace, remote_tags)

    records = collect_tag_records(namespace, local_tags=local_tags, remote_tags=remote_tags)
    latest = select_latest(records)
    logger.debug("latest version for %r: %s (%d tags)", namespace, latest, len(records))

    return VersionResolution(
        namespace=namespace,
        version=latest,
        is_repository=True,
        remote_error=remote_error,
        tag_count=len(records),
    )
