import logging

import click

from monotag.cli.commands.apps import apps_cmd
from monotag.cli.commands.commits import commits_cmd
from monotag.cli.commands.config import config_group
from monotag.cli.commands.create import create_cmd
from monotag.cli.commands.latest import latest_cmd, next_cmd
from monotag.cli.commands.push import push_cmd
from monotag.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="monotag")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Create namespaced semver tags (@app/1.2.3) for apps in a monorepo."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(dry_run=False)


cli.add_command(apps_cmd)
cli.add_command(commits_cmd)
cli.add_command(config_group)
cli.add_command(create_cmd)
cli.add_command(latest_cmd)
cli.add_command(next_cmd)
cli.add_command(push_cmd)
