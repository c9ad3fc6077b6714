"""Command-line interface for netprofile (Click-based)."""

from __future__ import annotations

import click

# Import to trigger registry decorators
from netprofile import estimators  # noqa: F401
from netprofile import sources  # noqa: F401

from ._console import setup_logging
from .list import list_cmd
from .profile import profile


@click.group(help="Per-origin network timing profiles from recorded request logs")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Top-level CLI group."""
    setup_logging(verbose)


cli.add_command(profile, "profile")
cli.add_command(list_cmd, "list")


def main() -> None:
    """CLI entry point for console scripts."""
    cli()


__all__ = ["cli", "main"]
