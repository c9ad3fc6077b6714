from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence

from .types import NormalizedRequest, ProfileContext


class RecordSource(ABC):
    """Base class for request-log normalizers."""

    source_id: str
    source_name: str

    def __init__(self, **config: Any) -> None:
        self._config = config

    @abstractmethod
    async def request(
        self, log_source: Any, context: ProfileContext
    ) -> Sequence[NormalizedRequest]:
        """Load ``log_source`` and return its normalized requests."""


__all__ = ["RecordSource"]
