"""Build a network profile from a request log."""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Dict

import click

from netprofile.core.errors import NetworkProfileError
from netprofile.core.types import NetworkProfile, ProfileConfig
from netprofile.execution import ProfileRunner

from ._console import info, success


def _collect_params(ctx, param, values):
    collected: Dict[str, str] = {}
    for item in values:
        for piece in item.split(","):
            if not piece:
                continue
            key, _, raw = piece.partition("=")
            key = key.strip()
            if not key:
                continue
            collected[key] = raw.strip()
    return collected


@click.command(help="Compute baseline RTT, per-origin RTT and server response times.")
@click.argument("log_source", type=click.Path(exists=True))
@click.option("--source", "source_id", default="dataset", help="Record source identifier")
@click.option("--estimator", "estimator_id", default="timing", help="Estimator identifier")
@click.option("--source-param", multiple=True, callback=_collect_params, help="Source params key=value")
@click.option("--estimator-param", multiple=True, callback=_collect_params, help="Estimator params key=value")
@click.option("--context", "context_option", multiple=True, callback=_collect_params, help="Context options key=value")
@click.option("--output", "output_path", type=click.Path(path_type=Path), help="Write the profile as JSON")
@click.option("--include-records", is_flag=True, help="Include normalized records in the written profile.")
@click.option("--json", "json_output", is_flag=True, help="Emit the profile as JSON.")
def profile(
    log_source: str,
    source_id: str,
    estimator_id: str,
    source_param,
    estimator_param,
    context_option,
    output_path: Path | None,
    include_records: bool,
    json_output: bool,
) -> None:
    """Run the profile pipeline over a single request log."""
    config = ProfileConfig(
        log_source=log_source,
        source_id=source_id,
        estimator_id=estimator_id,
        source_params=source_param,
        estimator_params=estimator_param,
        context_options=context_option,
        output_path=output_path,
        include_records=include_records,
    )

    runner = ProfileRunner(config)
    try:
        result = runner.run()
    except (NetworkProfileError, FileNotFoundError) as exc:
        raise click.ClickException(str(exc)) from exc
    except (KeyError, ValueError, TypeError) as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc

    if json_output:
        click.echo(json.dumps(result.to_dict(include_records=include_records), indent=2))
        return

    _print_profile(result)
    if runner.output_path is not None:
        info("")
        success(f"Profile written to: {runner.output_path}")


def _print_profile(result: NetworkProfile) -> None:
    info("")
    info(f"Requests: {len(result.records)}")
    info(f"Baseline RTT: {_ms(result.rtt)}")
    info(f"Throughput: {_throughput(result.throughput)}")
    info("")
    info("Per-origin timing:")
    for origin in result.origins:
        info(
            f"  {origin}: additional_rtt={_ms(result.additional_rtt_by_origin[origin])} "
            f"server_response_time={_ms(result.server_response_time_by_origin[origin])}"
        )


def _ms(value: float) -> str:
    return f"{value:.5g}ms"


def _throughput(value: float) -> str:
    if math.isinf(value):
        return "unbounded"
    return f"{value / 1_000_000:.5g} Mbit/s"


__all__ = ["profile"]
