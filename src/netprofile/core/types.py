from __future__ import annotations

import math
from dataclasses import dataclass, field, fields
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple


def _freeze_mapping(mapping: Mapping[str, Any] | None) -> Mapping[str, Any]:
    if mapping is None:
        return MappingProxyType({})
    if isinstance(mapping, MappingProxyType):
        return mapping
    return MappingProxyType(dict(mapping))


@dataclass(slots=True, frozen=True)
class NormalizedRequest:
    """One completed network request as produced by a record source.

    Timing marks are absolute milliseconds on a shared clock; ``None`` means the
    mark was not recorded for this request.
    """

    request_id: str
    url: str
    origin: str
    start_ms: float
    end_ms: float
    send_start_ms: Optional[float] = None
    response_headers_end_ms: Optional[float] = None
    connect_start_ms: Optional[float] = None
    connect_end_ms: Optional[float] = None
    ssl_start_ms: Optional[float] = None
    ssl_end_ms: Optional[float] = None
    connection_id: Optional[str] = None
    connection_reused: bool = False
    transfer_size: int = 0
    protocol: str = ""
    status_code: Optional[int] = None
    from_cache: bool = False
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "metadata", _freeze_mapping(self.metadata))

    @property
    def ttfb_ms(self) -> Optional[float]:
        if self.send_start_ms is None or self.response_headers_end_ms is None:
            return None
        return self.response_headers_end_ms - self.send_start_ms


@dataclass(slots=True)
class TimingSummary:
    """Distribution summary of per-origin timing samples, in milliseconds."""

    min: Optional[float] = None
    max: Optional[float] = None
    avg: Optional[float] = None
    median: Optional[float] = None
    count: int = 0


# The combiner reads ``min`` from RTT summaries and ``median`` from
# response-time summaries; both come out of the same estimator helpers.
OriginRttSummary = TimingSummary
OriginResponseTimeSummary = TimingSummary


@dataclass(slots=True, frozen=True)
class OriginTiming:
    """Baseline latency plus per-origin deltas and server response times."""

    rtt: float
    additional_rtt_by_origin: Mapping[str, float]
    server_response_time_by_origin: Mapping[str, float]


@dataclass(slots=True, frozen=True)
class NetworkProfile:
    """Per-origin network timing profile consumed by a page-load simulator."""

    rtt: float
    additional_rtt_by_origin: Mapping[str, float]
    server_response_time_by_origin: Mapping[str, float]
    throughput: float
    records: Tuple[NormalizedRequest, ...] = field(default_factory=tuple)

    @property
    def origins(self) -> Sequence[str]:
        return sorted(self.additional_rtt_by_origin)

    def to_dict(self, *, include_records: bool = False) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "rtt": self.rtt,
            # JSON has no infinity; unbounded throughput is written as null
            "throughput": self.throughput if math.isfinite(self.throughput) else None,
            "additional_rtt_by_origin": dict(self.additional_rtt_by_origin),
            "server_response_time_by_origin": dict(self.server_response_time_by_origin),
            "record_count": len(self.records),
        }
        if include_records:
            records = []
            for record in self.records:
                raw = {item.name: getattr(record, item.name) for item in fields(record)}
                raw["metadata"] = dict(record.metadata)
                records.append(raw)
            payload["records"] = records
        return payload


@dataclass(slots=True, frozen=True)
class ProfileContext:
    """Options handed to the record source for one profile computation."""

    options: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", _freeze_mapping(self.options))


@dataclass(slots=True)
class ProfileConfig:
    log_source: str
    source_id: str = "dataset"
    estimator_id: str = "timing"

    source_params: Mapping[str, Any] = field(default_factory=dict)
    estimator_params: Mapping[str, Any] = field(default_factory=dict)
    context_options: Mapping[str, Any] = field(default_factory=dict)
    output_path: Path | None = None
    include_records: bool = False
