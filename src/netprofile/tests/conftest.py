from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

import pytest


def _request(**overrides: Any) -> Dict[str, Any]:
    row: Dict[str, Any] = {
        "request_id": "0",
        "url": "https://a.example/",
        "start_ms": 0.0,
        "end_ms": 100.0,
        "send_start_ms": 10.0,
        "response_headers_end_ms": 60.0,
        "connect_start_ms": -1,
        "connect_end_ms": -1,
        "ssl_start_ms": -1,
        "ssl_end_ms": -1,
        "connection_id": "1",
        "connection_reused": True,
        "transfer_size": 1000,
        "protocol": "h2",
        "status_code": 200,
        "from_cache": False,
    }
    row.update(overrides)
    return row


@pytest.fixture
def request_rows() -> List[Dict[str, Any]]:
    """Two origins: a.example has a 20ms handshake, cdn.b.example a 50ms one."""

    return [
        _request(
            request_id="1",
            url="https://a.example/",
            start_ms=0.0,
            connect_start_ms=0.0,
            connect_end_ms=40.0,
            ssl_start_ms=20.0,
            ssl_end_ms=40.0,
            send_start_ms=40.0,
            response_headers_end_ms=160.0,
            end_ms=200.0,
            connection_reused=False,
            transfer_size=5000,
        ),
        _request(
            request_id="2",
            url="https://a.example/app.js",
            start_ms=210.0,
            send_start_ms=210.0,
            response_headers_end_ms=330.0,
            end_ms=380.0,
            transfer_size=20000,
        ),
        _request(
            request_id="3",
            url="https://cdn.b.example/logo.png",
            start_ms=220.0,
            connect_start_ms=220.0,
            connect_end_ms=320.0,
            ssl_start_ms=270.0,
            ssl_end_ms=320.0,
            connection_id="2",
            send_start_ms=320.0,
            response_headers_end_ms=400.0,
            end_ms=450.0,
            connection_reused=False,
            transfer_size=12000,
        ),
        _request(
            request_id="4",
            url="https://cdn.b.example/cached.css",
            start_ms=460.0,
            send_start_ms=460.0,
            response_headers_end_ms=470.0,
            end_ms=475.0,
            connection_id="2",
            from_cache=True,
            transfer_size=0,
        ),
    ]


@pytest.fixture
def request_log(tmp_path: Path, request_rows: List[Dict[str, Any]]) -> Path:
    path = tmp_path / "requests.jsonl"
    path.write_text("\n".join(json.dumps(row) for row in request_rows) + "\n")
    return path
