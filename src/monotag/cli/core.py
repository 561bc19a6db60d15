"""Helpers shared by CLI commands: repository discovery, config, reporting."""

from pathlib import Path

import click

from monotag.cli.config import ConfigError, MonotagConfig, load_config
from monotag.cli.ensure import Ensure, fail
from monotag.core.app_discovery import AppInfo, AppsDirNotFound, discover_apps
from monotag.core.context import MonotagContext
from monotag.core.resolver import VersionResolution
from monotag.output import user_output


def discover_repo_root(ctx: MonotagContext) -> Path:
    """Repository root containing the current directory, or exit."""
    return Ensure.not_none(
        ctx.git.repo.get_repository_root(ctx.cwd),
        f"{ctx.cwd} is not inside a git repository",
    )


def load_config_or_exit(repo_root: Path) -> MonotagConfig:
    try:
        return load_config(repo_root)
    except ConfigError as e:
        fail(str(e))


def discover_apps_or_exit(repo_root: Path, config: MonotagConfig) -> list[AppInfo]:
    apps = discover_apps(repo_root, apps_dir=config.apps_dir, marker=config.app_marker)
    return Ensure.ideal_state(apps, (AppsDirNotFound,))


def ensure_known_app(repo_root: Path, config: MonotagConfig, name: str) -> str:
    """Validate an app name given on the command line.

    Any non-empty name is accepted when the repository has no apps directory,
    since the namespace is only a tag prefix.
    """
    Ensure.invariant(bool(name) and "/" not in name, f"Invalid app name: {name!r}")
    apps = discover_apps(repo_root, apps_dir=config.apps_dir, marker=config.app_marker)
    if isinstance(apps, AppsDirNotFound):
        return name
    names = [app.name for app in apps]
    Ensure.invariant(
        name in names,
        f"Unknown app '{name}'. Known apps: {', '.join(names) if names else '(none)'}",
    )
    return name


def report_resolution(
    resolution: VersionResolution, *, remote: str, show_latest: bool = True
) -> None:
    """Print warnings for a degraded resolution, then the latest version found.

    Commands that print the version on stdout pass show_latest=False.
    """
    if not resolution.is_repository:
        user_output(click.style("Warning: ", fg="yellow") + "not a git repository; assuming 0.0.0")
        return
    if resolution.remote_error is not None:
        user_output(
            click.style("Warning: ", fg="yellow")
            + f"could not list tags on '{remote}'; using local tags only"
        )
        user_output(click.style(resolution.remote_error, dim=True))
    if not show_latest:
        return
    if resolution.has_tags:
        user_output(f"Latest version of {resolution.namespace}: {resolution.version}")
    else:
        user_output(f"No tags found for {resolution.namespace}; starting from 0.0.0")
