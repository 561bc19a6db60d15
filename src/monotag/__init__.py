"""monotag CLI entry point.

This package provides a Click-based CLI for creating namespaced semver tags
(``@<app>/<major>.<minor>.<patch>``) for apps living in a monorepo. See
`monotag --help` for details.
"""

from monotag.cli.cli import cli


def main() -> None:
    """CLI entry point used by the `monotag` console script."""
    cli()
