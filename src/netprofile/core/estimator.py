from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping, Sequence

from .types import NormalizedRequest, TimingSummary


class NetworkEstimator(ABC):
    """Statistics capability producing per-origin summaries and throughput."""

    estimator_id: str
    estimator_name: str

    def __init__(self, **config: Any) -> None:
        self._config = config

    @abstractmethod
    def estimate_rtt_by_origin(
        self, records: Sequence[NormalizedRequest]
    ) -> Mapping[str, TimingSummary]:
        """Return an RTT summary for every origin with usable timing data."""

    @abstractmethod
    def estimate_server_response_time_by_origin(
        self,
        records: Sequence[NormalizedRequest],
        *,
        rtt_by_origin: Mapping[str, TimingSummary],
    ) -> Mapping[str, TimingSummary]:
        """Return a response-time summary keyed exactly like ``rtt_by_origin``."""

    @abstractmethod
    def estimate_throughput(self, records: Sequence[NormalizedRequest]) -> float:
        """Return the observed throughput in bits per second."""


__all__ = ["NetworkEstimator"]
