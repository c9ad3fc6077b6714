"""Record source reading request logs through Hugging Face ``datasets``."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence
from urllib.parse import urlsplit

from datasets import Dataset, DatasetDict, disable_progress_bars, load_from_disk
from datasets.builder import DatasetGenerationError

from ..core.errors import InvalidInputError, LogFormatError
from ..core.params import to_bool, to_float
from ..core.registry import RecordSourceRegistry
from ..core.source import RecordSource
from ..core.types import NormalizedRequest, ProfileContext

logger = logging.getLogger(__name__)

_TIMING_FIELDS = (
    "send_start_ms",
    "response_headers_end_ms",
    "connect_start_ms",
    "connect_end_ms",
    "ssl_start_ms",
    "ssl_end_ms",
)
_KNOWN_FIELDS = frozenset(
    (
        "request_id",
        "url",
        "origin",
        "start_ms",
        "end_ms",
        "connection_id",
        "connection_reused",
        "transfer_size",
        "protocol",
        "status_code",
        "from_cache",
        *_TIMING_FIELDS,
    )
)
_DEFAULT_PORTS = {"http": 80, "https": 443, "ws": 80, "wss": 443}


@RecordSourceRegistry.register()
class DatasetRecordSource(RecordSource):
    """Load requests from a saved dataset directory or a JSON / JSON-lines file.

    Rows use the :class:`NormalizedRequest` field names. Timing marks of ``-1``
    (the devtools convention for "not recorded") are treated as missing.
    """

    source_id = "dataset"
    source_name = "Dataset request log"

    async def request(
        self, log_source: Any, context: ProfileContext
    ) -> Sequence[NormalizedRequest]:
        path = Path(log_source)
        if not path.exists():
            raise FileNotFoundError(f"Request log not found: {path}")

        rows = await asyncio.to_thread(self._load_rows, path)
        include_cached = to_bool(context.options.get("include_cached", True))

        records: List[NormalizedRequest] = []
        for index, row in enumerate(rows):
            record = parse_request(row, index=index)
            if record.from_cache and not include_cached:
                continue
            records.append(record)

        if not records:
            raise InvalidInputError(f"No requests found in {path}", stage="records")
        logger.debug("Normalized %d of %d rows from %s", len(records), len(rows), path)
        return tuple(records)

    def _load_rows(self, path: Path) -> List[Dict[str, Any]]:
        # Progress bars go to stderr and would interleave with --json output.
        disable_progress_bars()
        try:
            if path.is_dir():
                data = load_from_disk(str(path))
                if isinstance(data, DatasetDict):
                    if not data:
                        raise LogFormatError(f"No splits found in dataset at {path}", stage="records")
                    data = next(iter(data.values()))
            else:
                data = Dataset.from_json(str(path))
        except (DatasetGenerationError, ValueError) as exc:
            raise LogFormatError(f"Failed to read request log at {path}: {exc}", stage="records") from exc

        if not isinstance(data, Dataset):
            raise LogFormatError(
                f"Unsupported dataset object returned for {path}: {type(data)!r}", stage="records"
            )
        return data.to_list()


def parse_request(raw: Mapping[str, Any], *, index: int = 0) -> NormalizedRequest:
    """Normalize one raw row into a :class:`NormalizedRequest`."""

    url = str(raw.get("url") or "").strip()
    origin = str(raw.get("origin") or "").strip() or derive_origin(url)
    if not origin:
        raise LogFormatError(f"Row {index} has neither an origin nor a usable url", stage="records")

    start_ms = _to_timing(raw.get("start_ms"))
    end_ms = _to_timing(raw.get("end_ms"))
    if start_ms is None or end_ms is None:
        raise LogFormatError(
            f"Row {index} is missing start_ms/end_ms", stage="records", origin=origin
        )

    timings = {name: _to_timing(raw.get(name)) for name in _TIMING_FIELDS}
    connection_id = raw.get("connection_id")
    transfer_size = _to_int(raw.get("transfer_size"), "transfer_size", index, origin)
    status_code = _to_int(raw.get("status_code"), "status_code", index, origin)
    metadata = {
        key: value for key, value in raw.items() if key not in _KNOWN_FIELDS and value is not None
    }

    return NormalizedRequest(
        request_id=str(raw.get("request_id") or index),
        url=url,
        origin=origin,
        start_ms=start_ms,
        end_ms=end_ms,
        connection_id=str(connection_id) if connection_id is not None else None,
        connection_reused=to_bool(raw.get("connection_reused", False)),
        transfer_size=transfer_size or 0,
        protocol=str(raw.get("protocol") or ""),
        status_code=status_code,
        from_cache=to_bool(raw.get("from_cache", False)),
        metadata=metadata,
        **timings,
    )


def derive_origin(url: str) -> str:
    """Return ``scheme://host:port`` for ``url``, or an empty string."""

    if not url:
        return ""
    try:
        parts = urlsplit(url)
        port = parts.port
    except ValueError:
        return ""
    scheme = parts.scheme.lower()
    host = (parts.hostname or "").lower()
    if not scheme or not host:
        return ""
    if ":" in host:
        host = f"[{host}]"
    if port is None:
        port = _DEFAULT_PORTS.get(scheme)
    if port is None:
        return f"{scheme}://{host}"
    return f"{scheme}://{host}:{port}"


def _to_timing(value: Any) -> Optional[float]:
    number = to_float(value)
    if number is None or number < 0:
        return None
    return number


def _to_int(value: Any, name: str, index: int, origin: str) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise LogFormatError(
            f"Row {index} has a non-numeric {name}: {value!r}", stage="records", origin=origin
        ) from exc


__all__ = ["DatasetRecordSource", "derive_origin", "parse_request"]
