"""Small helpers shared by the domain dataclasses."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, List


def new_id() -> str:
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def ensure_list(value: Any) -> List[Any]:
    """Coerce a scalar or iterable into a list."""

    if value is None:
        return []
    if isinstance(value, (list, tuple, set)):
        return list(value)
    return [value]


def clamp_score(value: Any, low: int = 0, high: int = 100) -> int:
    """Round a model-provided score and pin it to ``[low, high]``."""

    try:
        score = int(round(float(value)))
    except (TypeError, ValueError):
        return low
    return max(low, min(high, score))


__all__ = ["new_id", "utc_now", "ensure_list", "clamp_score"]
