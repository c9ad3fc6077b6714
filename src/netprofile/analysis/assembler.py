"""Network profile assembly."""

from __future__ import annotations

import logging
from typing import Any

from ..core.errors import InvalidInputError
from ..core.estimator import NetworkEstimator
from ..core.source import RecordSource
from ..core.types import NetworkProfile, ProfileContext
from .combiner import combine_rtt_and_server_response_time

logger = logging.getLogger(__name__)


async def assemble_network_profile(
    log_source: Any,
    context: ProfileContext,
    *,
    source: RecordSource,
    estimator: NetworkEstimator,
) -> NetworkProfile:
    """Normalize ``log_source`` and summarize it into a :class:`NetworkProfile`.

    Only the record source may suspend. Errors raised by either collaborator are
    propagated unchanged and no partial profile is returned.
    """

    records = tuple(await source.request(log_source, context))
    logger.info("Loaded %d requests from %s", len(records), log_source)

    throughput = estimator.estimate_throughput(records)

    rtt_by_origin = estimator.estimate_rtt_by_origin(records)
    if not rtt_by_origin:
        raise InvalidInputError("No origin has usable RTT timing data", stage="rtt")

    # RTT is passed along so the estimator can separate network time from server time.
    response_time_by_origin = estimator.estimate_server_response_time_by_origin(
        records,
        rtt_by_origin=rtt_by_origin,
    )

    timing = combine_rtt_and_server_response_time(rtt_by_origin, response_time_by_origin)
    logger.info(
        "Profiled %d origins: baseline RTT %.2fms, throughput %.0f bit/s",
        len(timing.additional_rtt_by_origin),
        timing.rtt,
        throughput,
    )

    return NetworkProfile(
        rtt=timing.rtt,
        additional_rtt_by_origin=timing.additional_rtt_by_origin,
        server_response_time_by_origin=timing.server_response_time_by_origin,
        throughput=throughput,
        records=records,
    )


__all__ = ["assemble_network_profile"]
