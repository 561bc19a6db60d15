"""Print the latest released version of an app."""

import click

from monotag.cli.core import (
    discover_repo_root,
    ensure_known_app,
    load_config_or_exit,
    report_resolution,
)
from monotag.core.context import MonotagContext
from monotag.core.resolver import resolve_latest_version
from monotag.core.versioning import INCREMENT_CLASSES, IncrementClass, increment_version
from monotag.output import machine_output


@click.command("latest")
@click.argument("app")
@click.pass_obj
def latest_cmd(ctx: MonotagContext, app: str) -> None:
    """Print the highest @APP/X.Y.Z version (0.0.0 if there is none).

    Local tags and tags on the configured remote are both considered.
    """
    repo_root = discover_repo_root(ctx)
    config = load_config_or_exit(repo_root)
    app = ensure_known_app(repo_root, config, app)

    resolution = resolve_latest_version(ctx.git, repo_root, app, remote=config.remote)
    report_resolution(resolution, remote=config.remote, show_latest=False)
    machine_output(str(resolution.version))


@click.command("next")
@click.argument("app")
@click.option(
    "--bump",
    type=click.Choice(INCREMENT_CLASSES),
    default="patch",
    show_default=True,
    help="Version component to increment",
)
@click.pass_obj
def next_cmd(ctx: MonotagContext, app: str, bump: IncrementClass) -> None:
    """Print the version the next release of APP would get."""
    repo_root = discover_repo_root(ctx)
    config = load_config_or_exit(repo_root)
    app = ensure_known_app(repo_root, config, app)

    resolution = resolve_latest_version(ctx.git, repo_root, app, remote=config.remote)
    report_resolution(resolution, remote=config.remote, show_latest=False)
    machine_output(str(increment_version(resolution.version, bump)))
