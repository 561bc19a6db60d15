"""Create (and optionally push) the next version tag of a monorepo app."""

from dataclasses import replace
from typing import cast

import click

from monotag.cli.core import (
    discover_apps_or_exit,
    discover_repo_root,
    ensure_known_app,
    load_config_or_exit,
    report_resolution,
)
from monotag.cli.ensure import Ensure, fail
from monotag.cli.prompts import (
    confirm_push,
    confirm_version,
    input_tag_message,
    select_app,
    select_commit,
    select_increment,
)
from monotag.core.commits import get_recent_commits
from monotag.core.context import MonotagContext
from monotag.core.resolver import resolve_latest_version
from monotag.core.tagging import create_and_push_tag, create_tag, push_tag
from monotag.core.versioning import (
    INCREMENT_CLASSES,
    IncrementClass,
    InvalidVersion,
    VersionTriple,
    format_tag_name,
    increment_version,
    validate_version_input,
)
from monotag.gateway.git.dry_run import DryRunGit
from monotag.output import machine_output, user_output


def _report_push_failure(app: str, version: VersionTriple, diagnostic: str) -> None:
    tag_name = format_tag_name(app, version)
    user_output(click.style("Push failed: ", fg="red") + f"{tag_name} exists locally only")
    if diagnostic:
        user_output(click.style(diagnostic, dim=True))
    user_output(f"Retry with: monotag push {app} {version}")


@click.command("create")
@click.argument("app", required=False)
@click.option(
    "--bump",
    type=click.Choice(INCREMENT_CLASSES),
    help="Version component to increment (skips the bump and version prompts)",
)
@click.option("--version", "version_text", help="Exact version to tag, e.g. 1.4.0")
@click.option("--commit", "commit_ref", help="Commit to tag (default: pick from recent commits)")
@click.option("-m", "--message", help="Annotated tag message")
@click.option(
    "--push/--no-push",
    default=None,
    help="Push after creating (default: config push_always, else ask)",
)
@click.option("--dry-run", is_flag=True, help="Print git mutations instead of running them")
@click.pass_obj
def create_cmd(
    ctx: MonotagContext,
    app: str | None,
    bump: str | None,
    version_text: str | None,
    commit_ref: str | None,
    message: str | None,
    push: bool | None,
    dry_run: bool,
) -> None:
    """Tag the next version of an app as @APP/MAJOR.MINOR.PATCH.

    Resolves the latest version from local and remote tags, bumps it, and
    creates an annotated tag on the chosen commit. Anything not given as an
    option is asked for interactively.

    Examples:

    \b
      # Fully interactive
      monotag create

    \b
      # Scripted minor release of the billing app
      monotag create billing --bump minor --commit HEAD -m "Billing release" --push
    """
    Ensure.invariant(
        bump is None or version_text is None, "--bump and --version are mutually exclusive"
    )
    if dry_run and not ctx.dry_run:
        ctx = replace(ctx, git=DryRunGit(ctx.git), dry_run=True)

    repo_root = discover_repo_root(ctx)
    config = load_config_or_exit(repo_root)

    if app is None:
        apps = discover_apps_or_exit(repo_root, config)
        Ensure.invariant(
            bool(apps),
            f"No apps found in {config.apps_dir}/ (looking for {config.app_marker})",
        )
        app = select_app(apps).name
    else:
        app = ensure_known_app(repo_root, config, app)

    resolution = resolve_latest_version(ctx.git, repo_root, app, remote=config.remote)
    report_resolution(resolution, remote=config.remote)

    if version_text is not None:
        version = Ensure.ideal_state(validate_version_input(version_text), (InvalidVersion,))
    elif bump is not None:
        version = increment_version(resolution.version, cast(IncrementClass, bump))
    else:
        increment = select_increment(resolution.version)
        version = confirm_version(increment_version(resolution.version, increment))

    tag_name = format_tag_name(app, version)
    Ensure.invariant(
        not ctx.git.tag.tag_exists(repo_root, tag_name), f"Tag {tag_name} already exists"
    )
    if version <= resolution.version and resolution.has_tags:
        user_output(
            click.style("Warning: ", fg="yellow")
            + f"{version} is not newer than the latest version {resolution.version}"
        )

    if commit_ref is None:
        commit_ref = select_commit(get_recent_commits(ctx.git, repo_root, config.recent_commits))
    Ensure.invariant(bool(commit_ref.strip()), "Commit must not be empty")

    if message is None:
        message = input_tag_message(default=f"Release {tag_name}")
    Ensure.invariant(bool(message.strip()), "Tag message must not be empty")

    should_push = push if push is not None else (True if config.push_always else None)

    if should_push:
        outcome = create_and_push_tag(
            ctx.git, repo_root, app, version, commit_ref, message, remote=config.remote
        )
        if not outcome.created:
            fail(f"Failed to create tag {tag_name}")
        user_output(click.style("✓ ", fg="green") + f"Created tag {tag_name} at {commit_ref}")
        if not outcome.success:
            _report_push_failure(app, version, outcome.push.message if outcome.push else "")
            raise SystemExit(1)
        user_output(click.style("✓ ", fg="green") + f"Pushed {tag_name} to {config.remote}")
        machine_output(tag_name)
        return

    if not create_tag(ctx.git, repo_root, app, version, commit_ref, message):
        fail(f"Failed to create tag {tag_name}")
    user_output(click.style("✓ ", fg="green") + f"Created tag {tag_name} at {commit_ref}")

    if should_push is None and confirm_push(tag_name, config.remote):
        push_outcome = push_tag(ctx.git, repo_root, app, version, remote=config.remote)
        if not push_outcome.success:
            _report_push_failure(app, version, push_outcome.message)
            raise SystemExit(1)
        user_output(click.style("✓ ", fg="green") + f"Pushed {tag_name} to {config.remote}")
    else:
        user_output(f"Tag kept local. Push later with: monotag push {app} {version}")

    machine_output(tag_name)
