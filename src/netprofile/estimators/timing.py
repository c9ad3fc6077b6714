"""Estimate RTT, server response time and throughput from request timing marks."""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, Mapping, Optional, Sequence

from ..analysis.statistics import (
    create_sample_container,
    merge_intervals,
    register_sample,
    summarize_by_origin,
)
from ..core.estimator import NetworkEstimator
from ..core.params import to_bool
from ..core.registry import EstimatorRegistry
from ..core.types import NormalizedRequest, TimingSummary

logger = logging.getLogger(__name__)

DEFAULT_COARSE_ESTIMATE_MULTIPLIER = 0.3


@EstimatorRegistry.register()
class TimingEstimator(NetworkEstimator):
    """Estimator working from per-request connection and header timings.

    A fresh TCP handshake costs one round trip, so its duration is the preferred
    RTT sample. Origins whose connections were all reused only have TTFB, which
    also contains server time; a fraction of it is used as a coarse estimate.
    """

    estimator_id = "timing"
    estimator_name = "Connection timing"

    def __init__(self, **config: Any) -> None:
        super().__init__(**config)
        self.use_coarse_estimates = to_bool(config.get("use_coarse_estimates", True))
        self.coarse_estimate_multiplier = float(
            config.get("coarse_estimate_multiplier", DEFAULT_COARSE_ESTIMATE_MULTIPLIER)
        )
        self.include_cached = to_bool(config.get("include_cached", False))
        if not 0 < self.coarse_estimate_multiplier <= 1:
            raise ValueError(
                f"coarse_estimate_multiplier must be in (0, 1], got {self.coarse_estimate_multiplier}"
            )

    def estimate_rtt_by_origin(
        self, records: Sequence[NormalizedRequest]
    ) -> Dict[str, TimingSummary]:
        handshake_samples = create_sample_container()
        coarse_samples = create_sample_container()

        for record in self._sampled(records):
            register_sample(handshake_samples, record.origin, _handshake_rtt(record))
            ttfb = record.ttfb_ms
            if ttfb is not None:
                register_sample(
                    coarse_samples, record.origin, ttfb * self.coarse_estimate_multiplier
                )

        summaries = summarize_by_origin(handshake_samples)
        if self.use_coarse_estimates:
            for origin, summary in summarize_by_origin(coarse_samples).items():
                if origin not in summaries:
                    logger.debug("Using coarse TTFB-based RTT estimate for %s", origin)
                    summaries[origin] = summary
        return summaries

    def estimate_server_response_time_by_origin(
        self,
        records: Sequence[NormalizedRequest],
        *,
        rtt_by_origin: Mapping[str, TimingSummary],
    ) -> Dict[str, TimingSummary]:
        samples = create_sample_container()
        for record in self._sampled(records):
            rtt_summary = rtt_by_origin.get(record.origin)
            if rtt_summary is None or rtt_summary.min is None:
                continue
            ttfb = record.ttfb_ms
            if ttfb is None:
                continue
            register_sample(samples, record.origin, max(ttfb - rtt_summary.min, 0.0))

        summaries = summarize_by_origin(samples)
        for origin in rtt_by_origin:
            if origin not in summaries:
                # Keep the key set aligned with the RTT summaries.
                summaries[origin] = TimingSummary(min=0.0, max=0.0, avg=0.0, median=0.0, count=0)
        return summaries

    def estimate_throughput(self, records: Sequence[NormalizedRequest]) -> float:
        total_bits = 0.0
        windows = []
        for record in records:
            if record.from_cache or record.transfer_size <= 0:
                continue
            if record.response_headers_end_ms is None:
                continue
            total_bits += record.transfer_size * 8
            windows.append((record.response_headers_end_ms, record.end_ms))

        total_ms = sum(end - start for start, end in merge_intervals(windows))
        if total_ms <= 0:
            return math.inf
        return total_bits / (total_ms / 1000.0)

    def _sampled(self, records: Sequence[NormalizedRequest]):
        for record in records:
            if record.from_cache and not self.include_cached:
                continue
            if record.ttfb_ms is None:
                continue
            yield record


def _handshake_rtt(record: NormalizedRequest) -> Optional[float]:
    if record.connection_reused:
        return None
    start = record.connect_start_ms
    end = record.connect_end_ms
    if start is None or end is None:
        return None
    # connect_end includes the TLS handshake when one happened
    if record.ssl_start_ms is not None and start <= record.ssl_start_ms <= end:
        end = record.ssl_start_ms
    if end <= start:
        return None
    return end - start


__all__ = ["DEFAULT_COARSE_ESTIMATE_MULTIPLIER", "TimingEstimator"]
