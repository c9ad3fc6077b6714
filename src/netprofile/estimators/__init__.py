"""Built-in network estimators.

Estimators register themselves with ``netprofile.core.EstimatorRegistry``.
"""

from .timing import TimingEstimator

__all__ = ["TimingEstimator"]
