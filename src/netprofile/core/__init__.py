"""
Core abstractions and shared types for netprofile.
"""

from .errors import (
    InconsistentOriginSetError,
    InvalidInputError,
    LogFormatError,
    NetworkProfileError,
)
from .estimator import NetworkEstimator
from .registry import EstimatorRegistry, RecordSourceRegistry, RegistryBase
from .source import RecordSource
from .types import (
    NetworkProfile,
    NormalizedRequest,
    OriginResponseTimeSummary,
    OriginRttSummary,
    OriginTiming,
    ProfileConfig,
    ProfileContext,
    TimingSummary,
)

__all__ = [
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
    "RegistryBase",
    "TimingSummary",
]
