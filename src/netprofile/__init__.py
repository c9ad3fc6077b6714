"""
Per-origin network timing profiles for page-load simulation.

This module exposes the primary extension points so downstream packages can
import from a single namespace.
"""

from .analysis import assemble_network_profile, combine_rtt_and_server_response_time
from .core.errors import (
    InconsistentOriginSetError,
    InvalidInputError,
    LogFormatError,
    NetworkProfileError,
)
from .core.estimator import NetworkEstimator
from .core.registry import EstimatorRegistry, RecordSourceRegistry
from .core.source import RecordSource
from .core.types import (
    NetworkProfile,
    NormalizedRequest,
    OriginResponseTimeSummary,
    OriginRttSummary,
    OriginTiming,
    ProfileConfig,
    ProfileContext,
    TimingSummary,
)
from .estimators import TimingEstimator
from .sources import DatasetRecordSource

__all__ = [
    "assemble_network_profile",
    "combine_rtt_and_server_response_time",
    "DatasetRecordSource",
    "EstimatorRegistry",
    "InconsistentOriginSetError",
    "InvalidInputError",
    "LogFormatError",
    "NetworkEstimator",
    "NetworkProfile",
    "NetworkProfileError",
    "NormalizedRequest",
    "OriginResponseTimeSummary",
    "OriginRttSummary",
    "OriginTiming",
    "ProfileConfig",
    "ProfileContext",
    "RecordSource",
    "RecordSourceRegistry",
    "TimingEstimator",
    "TimingSummary",
]
