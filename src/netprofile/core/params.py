from __future__ import annotations

from typing import Any, Optional

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


def to_bool(value: Any) -> bool:
    """Interpret ``key=value`` style parameters, where everything is a string."""
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_VALUES
    return bool(value)


def to_float(value: Any) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


__all__ = ["to_bool", "to_float"]
