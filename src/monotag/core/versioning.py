"""Semantic version triples and the `@<namespace>/<version>` tag grammar.

Only strict three-component numeric versions are recognised. Parsing never
raises on bad input: functions used while scanning tags return None so one
malformed tag cannot abort a batch, and `validate_version_input` returns an
InvalidVersion value for callers that need to tell the user why.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

IncrementClass = Literal["major", "minor", "patch"]
INCREMENT_CLASSES: tuple[IncrementClass, ...] = ("major", "minor", "patch")

VersionOrdering = Literal["greater", "equal", "less"]

# ASCII digits only; \d would also accept other Unicode decimal digits
_VERSION_RE = re.compile(r"([0-9]+)\.([0-9]+)\.([0-9]+)")


@dataclass(frozen=True, order=True)
class VersionTriple:
    """A (major, minor, patch) version, ordered lexicographically."""

    major: int
    minor: int
    patch: int

    @classmethod
    def zero(cls) -> VersionTriple:
        return cls(0, 0, 0)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


@dataclass(frozen=True)
class InvalidVersion:
    """Rejected version text. Implements NonIdealState."""

    text: str

    @property
    def message(self) -> str:
        return f"Invalid version '{self.text}': expected MAJOR.MINOR.PATCH (e.g. 1.0.0)"

    @property
    def error_type(self) -> str:
        return "invalid-version"


def parse_version(text: str) -> VersionTriple | None:
    """Parse 'MAJOR.MINOR.PATCH' into a VersionTriple.

    Returns None unless the whole string matches: no 'v' prefix, no sign,
    no surrounding whitespace, no pre-release or build suffix.
    """
    match = _VERSION_RE.fullmatch(text)
    if match is None:
        return None
    major, minor, patch = (int(group) for group in match.groups())
    return VersionTriple(major, minor, patch)


def validate_version_input(text: str) -> VersionTriple | InvalidVersion:
    """Parse operator-entered version text, keeping the rejected input on failure."""
    version = parse_version(text)
    if version is None:
        return InvalidVersion(text=text)
    return version


def tag_prefix(namespace: str) -> str:
    """Prefix shared by every tag of a namespace, e.g. '@web/'."""
    return f"@{namespace}/"


def format_tag_name(namespace: str, version: VersionTriple) -> str:
    """Build the tag name '@<namespace>/<major>.<minor>.<patch>'."""
    return f"{tag_prefix(namespace)}{version}"


def parse_tag_version(tag: str, namespace: str) -> VersionTriple | None:
    """Extract the version from a tag belonging to `namespace`.

    The namespace is compared literally, so '@web-admin/2.0.0' is not a tag of
    'web' and '@a.b/1.0.0' is not a tag of 'a*b'.
    """
    prefix = tag_prefix(namespace)
    if not namespace or not tag.startswith(prefix):
        return None
    return parse_version(tag[len(prefix) :])


def compare_versions(a: VersionTriple, b: VersionTriple) -> VersionOrdering:
    """Order two versions by major, then minor, then patch."""
    if a > b:
        return "greater"
    if a < b:
        return "less"
    return "equal"


def increment_version(version: VersionTriple, increment: IncrementClass) -> VersionTriple:
    """Advance one component and reset the lower-order ones to zero.

    Raises:
        ValueError: If `increment` is not one of INCREMENT_CLASSES
    """
    if increment == "major":
        return VersionTriple(version.major + 1, 0, 0)
    if increment == "minor":
        return VersionTriple(version.major, version.minor + 1, 0)
    if increment == "patch":
        return VersionTriple(version.major, version.minor, version.patch + 1)
    raise ValueError(f"Unknown increment class: {increment!r}")
