"""Combine per-origin RTT and response-time summaries into a timing profile."""

from __future__ import annotations

import logging
import math
import numbers
from collections.abc import Mapping as MappingABC
from typing import Any, Dict, Mapping, Union, cast

from ..core.errors import InconsistentOriginSetError, InvalidInputError
from ..core.types import OriginTiming, TimingSummary

logger = logging.getLogger(__name__)

SummaryLike = Union[TimingSummary, Mapping[str, Any]]


def combine_rtt_and_server_response_time(
    rtt_by_origin: Mapping[str, SummaryLike],
    response_time_by_origin: Mapping[str, SummaryLike],
) -> OriginTiming:
    """Derive the baseline RTT, per-origin RTT deltas and server response times.

    The smallest RTT seen across all origins is taken as the connection latency
    every request pays; the remainder for each origin is reported separately so a
    simulator can apply its own connection latency on top. Server response time
    uses the median of each origin's response-time summary as is.
    """

    if not rtt_by_origin:
        raise InvalidInputError("No origins with RTT data were observed", stage="combine")

    rtt_keys = set(rtt_by_origin)
    response_keys = set(response_time_by_origin)
    if rtt_keys != response_keys:
        missing = rtt_keys - response_keys
        unexpected = response_keys - rtt_keys
        raise InconsistentOriginSetError(
            "RTT and response-time summaries cover different origins: "
            f"missing={sorted(missing)} unexpected={sorted(unexpected)}",
            missing=missing,
            unexpected=unexpected,
        )

    rtt_for_origin: Dict[str, float] = {
        origin: _require_stat(summary, "min", origin) for origin, summary in rtt_by_origin.items()
    }
    minimum_rtt = min(rtt_for_origin.values())

    additional_rtt_by_origin: Dict[str, float] = {}
    server_response_time_by_origin: Dict[str, float] = {}
    for origin, rtt in rtt_for_origin.items():
        additional_rtt_by_origin[origin] = rtt - minimum_rtt
        server_response_time_by_origin[origin] = _require_stat(
            response_time_by_origin[origin], "median", origin
        )

    logger.debug(
        "Combined %d origins with baseline RTT %.2fms", len(rtt_for_origin), minimum_rtt
    )
    return OriginTiming(
        rtt=minimum_rtt,
        additional_rtt_by_origin=additional_rtt_by_origin,
        server_response_time_by_origin=server_response_time_by_origin,
    )


def _require_stat(summary: SummaryLike, name: str, origin: str) -> float:
    raw = _read_stat(summary, name)
    if raw is None:
        raise InvalidInputError(f"Summary has no '{name}' value", stage="combine", origin=origin)
    if isinstance(raw, bool) or not isinstance(raw, numbers.Real):
        raise InvalidInputError(
            f"Summary '{name}' must be a number, got {raw!r}", stage="combine", origin=origin
        )
    value = float(raw)
    if not math.isfinite(value) or value < 0:
        raise InvalidInputError(
            f"Summary '{name}' must be finite and non-negative, got {value}",
            stage="combine",
            origin=origin,
        )
    return value


def _read_stat(summary: SummaryLike, name: str) -> Any:
    if isinstance(summary, MappingABC):
        return cast(Mapping[str, Any], summary).get(name)
    return getattr(summary, name, None)


__all__ = ["combine_rtt_and_server_response_time"]
