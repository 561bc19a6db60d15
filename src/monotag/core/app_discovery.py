"""Discover the apps of a monorepo.

An app is an immediate subdirectory of the apps directory that contains a
marker file (package.json by default). The directory name is the app's tag
namespace.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class AppInfo:
    """A monorepo app and where it lives."""

    name: str
    path: Path


@dataclass(frozen=True)
class AppsDirNotFound:
    """The configured apps directory is missing. Implements NonIdealState."""

    apps_dir: Path

    @property
    def message(self) -> str:
        return f"No apps directory at {self.apps_dir}; is this a monorepo root?"

    @property
    def error_type(self) -> str:
        return "apps-dir-not-found"


def discover_apps(repo_root: Path, *, apps_dir: str, marker: str) -> list[AppInfo] | AppsDirNotFound:
    """List apps under `<repo_root>/<apps_dir>`, sorted by name."""
    root = repo_root / apps_dir
    if not root.is_dir():
        return AppsDirNotFound(apps_dir=root)

    apps = [
        AppInfo(name=entry.name, path=entry)
        for entry in root.iterdir()
        if entry.is_dir() and (entry / marker).is_file()
    ]
    return sorted(apps, key=lambda app: app.name)
