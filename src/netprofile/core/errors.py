"""Error taxonomy for network profile computation."""

from __future__ import annotations

from typing import Iterable, Optional


class NetworkProfileError(RuntimeError):
    """Base error carrying the pipeline stage and origin that failed."""

    def __init__(self, message: str, *, stage: str = "", origin: Optional[str] = None) -> None:
        super().__init__(message)
        self.stage = stage
        self.origin = origin

    def __str__(self) -> str:
        message = super().__str__()
        details = []
        if self.stage:
            details.append(f"stage={self.stage}")
        if self.origin:
            details.append(f"origin={self.origin}")
        if details:
            return f"{message} ({', '.join(details)})"
        return message


class InvalidInputError(NetworkProfileError):
    """No origin data is available to build a profile from."""


class InconsistentOriginSetError(NetworkProfileError):
    """RTT and response-time summaries disagree on the set of origins."""

    def __init__(
        self,
        message: str,
        *,
        missing: Iterable[str] = (),
        unexpected: Iterable[str] = (),
        stage: str = "combine",
    ) -> None:
        self.missing = tuple(sorted(missing))
        self.unexpected = tuple(sorted(unexpected))
        first = (self.missing or self.unexpected or (None,))[0]
        super().__init__(message, stage=stage, origin=first)


class LogFormatError(NetworkProfileError):
    """The request log could not be normalized."""


__all__ = [
    "InconsistentOriginSetError",
    "InvalidInputError",
    "LogFormatError",
    "NetworkProfileError",
]
