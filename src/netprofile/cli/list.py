"""List registered components (estimators and record sources)."""

from __future__ import annotations

import click

from netprofile.core.registry import EstimatorRegistry, RecordSourceRegistry

from ._console import error, info


@click.group(help="List available components")
def list_cmd() -> None:
    """List available components in the registry."""


@list_cmd.command("estimators", help="List available network estimators")
def list_estimators() -> None:
    entries = EstimatorRegistry.describe()

    if not entries:
        error("No estimators registered")
        return

    info("Estimators:")
    for estimator_id, name in entries:
        info(f"  {estimator_id:20} {name}")


@list_cmd.command("sources", help="List available record sources")
def list_sources() -> None:
    entries = RecordSourceRegistry.describe()

    if not entries:
        error("No record sources registered")
        return

    info("Sources:")
    for source_id, name in entries:
        info(f"  {source_id:20} {name}")


@list_cmd.command("all", help="List all available components")
def list_all() -> None:
    ctx = click.get_current_context()

    ctx.invoke(list_estimators)
    info("")
    ctx.invoke(list_sources)


__all__ = ["list_cmd"]
