"""Types for Git commit history queries."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CommitRecord:
    """One entry of `git log`, newest first.

    Attributes:
        sha: Full commit id
        short_sha: Abbreviated commit id
        subject: First line of the commit message
    """

    sha: str
    short_sha: str
    subject: str
