"""Read and write `.monotag/config.toml`."""

from dataclasses import asdict

import click

from monotag.cli.config import (
    ConfigError,
    get_config_keys,
    parse_config_value,
    write_config_value,
)
from monotag.cli.core import discover_repo_root, load_config_or_exit
from monotag.cli.ensure import Ensure, fail
from monotag.core.context import MonotagContext
from monotag.output import machine_output, user_output


def _format_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@click.group("config")
def config_group() -> None:
    """Manage monotag configuration for this repository."""


@config_group.command("list")
@click.pass_obj
def config_list(ctx: MonotagContext) -> None:
    """Print every config key with its effective value."""
    repo_root = discover_repo_root(ctx)
    values = asdict(load_config_or_exit(repo_root))
    for key, description in get_config_keys().items():
        machine_output(f"{key}={_format_value(values[key])}")
        user_output(click.style(f"  {description}", dim=True))


@config_group.command("get")
@click.argument("key")
@click.pass_obj
def config_get(ctx: MonotagContext, key: str) -> None:
    """Print the effective value of KEY."""
    Ensure.invariant(key in get_config_keys(), f"Unknown config key: {key}")
    repo_root = discover_repo_root(ctx)
    values = asdict(load_config_or_exit(repo_root))
    machine_output(_format_value(values[key]))


@config_group.command("set")
@click.argument("key")
@click.argument("value")
@click.pass_obj
def config_set(ctx: MonotagContext, key: str, value: str) -> None:
    """Set KEY to VALUE in .monotag/config.toml."""
    repo_root = discover_repo_root(ctx)
    try:
        parsed = parse_config_value(key, value)
    except ConfigError as e:
        fail(str(e))
    write_config_value(repo_root, key, parsed)
    user_output(f"Set {key}={_format_value(parsed)}")
