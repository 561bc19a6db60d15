"""List the apps of the monorepo."""

import click

from monotag.cli.core import discover_apps_or_exit, discover_repo_root, load_config_or_exit
from monotag.core.context import MonotagContext
from monotag.output import machine_output, user_output


@click.command("apps")
@click.pass_obj
def apps_cmd(ctx: MonotagContext) -> None:
    """List apps that can be tagged, one name per line."""
    repo_root = discover_repo_root(ctx)
    config = load_config_or_exit(repo_root)
    apps = discover_apps_or_exit(repo_root, config)

    if not apps:
        user_output(f"No apps found in {config.apps_dir}/ (looking for {config.app_marker})")
        return

    for app in apps:
        machine_output(app.name)
