"""Sample summaries for per-origin timing analysis."""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import numpy as np

from ..core.types import TimingSummary

SamplesByOrigin = Dict[str, List[float]]


def create_sample_container() -> SamplesByOrigin:
    return defaultdict(list)


def register_sample(samples: SamplesByOrigin, origin: str, value: Optional[float]) -> None:
    if value is None:
        return
    if not np.isfinite(value) or value < 0:
        return
    samples[origin].append(float(value))


def summarize_samples(values: Sequence[float]) -> TimingSummary:
    """Collapse raw samples into min/max/avg/median."""

    if not values:
        return TimingSummary()
    array = np.asarray(values, dtype=np.float64)
    array = array[np.isfinite(array)]
    if array.size == 0:
        return TimingSummary()
    return TimingSummary(
        min=float(np.min(array)),
        max=float(np.max(array)),
        avg=float(np.mean(array)),
        median=float(np.median(array)),
        count=int(array.size),
    )


def summarize_by_origin(samples: Mapping[str, Sequence[float]]) -> Dict[str, TimingSummary]:
    summaries: Dict[str, TimingSummary] = {}
    for origin, values in samples.items():
        summary = summarize_samples(values)
        if summary.count:
            summaries[origin] = summary
    return summaries


def merge_intervals(intervals: Iterable[Tuple[float, float]]) -> List[Tuple[float, float]]:
    """Return the union of ``[start, end]`` intervals as disjoint, sorted ranges."""

    merged: List[Tuple[float, float]] = []
    for start, end in sorted(intervals):
        if end < start:
            continue
        if merged and start <= merged[-1][1]:
            previous_start, previous_end = merged[-1]
            merged[-1] = (previous_start, max(previous_end, end))
        else:
            merged.append((start, end))
    return merged


__all__ = [
    "SamplesByOrigin",
    "create_sample_container",
    "merge_intervals",
    "register_sample",
    "summarize_by_origin",
    "summarize_samples",
]
