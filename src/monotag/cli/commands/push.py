"""Push an existing app tag to the remote."""

import click

from monotag.cli.core import discover_repo_root, ensure_known_app, load_config_or_exit
from monotag.cli.ensure import Ensure
from monotag.core.context import MonotagContext
from monotag.core.tagging import push_tag
from monotag.core.versioning import InvalidVersion, format_tag_name, validate_version_input
from monotag.output import user_output


@click.command("push")
@click.argument("app")
@click.argument("version")
@click.pass_obj
def push_cmd(ctx: MonotagContext, app: str, version: str) -> None:
    """Push the local tag @APP/VERSION to the configured remote.

    Use this to retry after `monotag create` created a tag but the push failed.
    """
    repo_root = discover_repo_root(ctx)
    config = load_config_or_exit(repo_root)
    app = ensure_known_app(repo_root, config, app)
    parsed = Ensure.ideal_state(validate_version_input(version), (InvalidVersion,))

    tag_name = format_tag_name(app, parsed)
    Ensure.invariant(
        ctx.git.tag.tag_exists(repo_root, tag_name),
        f"Tag {tag_name} does not exist locally; create it with `monotag create`",
    )

    outcome = push_tag(ctx.git, repo_root, app, parsed, remote=config.remote)
    if not outcome.success:
        user_output(click.style("Push failed: ", fg="red") + f"{tag_name} -> {config.remote}")
        user_output(click.style(outcome.message, dim=True))
        raise SystemExit(1)

    user_output(click.style("✓ ", fg="green") + f"Pushed {tag_name} to {config.remote}")
    user_output(click.style(outcome.message, dim=True))
