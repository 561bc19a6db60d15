"""Show recent commits as offered by the commit picker."""

import click

from monotag.cli.core import discover_repo_root, load_config_or_exit
from monotag.core.commits import get_recent_commits
from monotag.core.context import MonotagContext
from monotag.output import machine_output, user_output


@click.command("commits")
@click.option(
    "-n",
    "--count",
    type=click.IntRange(min=1),
    default=None,
    help="Number of commits (default: config recent_commits)",
)
@click.pass_obj
def commits_cmd(ctx: MonotagContext, count: int | None) -> None:
    """List recent commits, newest first."""
    repo_root = discover_repo_root(ctx)
    config = load_config_or_exit(repo_root)

    commits = get_recent_commits(ctx.git, repo_root, count or config.recent_commits)
    if not commits:
        user_output("No commits found")
        return

    for commit in commits:
        machine_output(f"{click.style(commit.short_sha, fg='yellow')}  {commit.display_text()}")
