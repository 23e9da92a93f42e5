"""
Small helpers shared by the RocketRez wrapper and handlers.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import Any

from api.rocketrez.models import RAW_PREVIEW_MAX_CHARS, RocketRezDebugInfo


def utc_timestamp(now: datetime | None = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2025-05-27T14:03:11.512Z."""
    now = now or datetime.now(UTC)
    return now.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def today_utc(now: datetime | None = None) -> str:
    """Current UTC date as YYYY-MM-DD."""
    now = now or datetime.now(UTC)
    return now.astimezone(UTC).strftime("%Y-%m-%d")


def top_level_keys(payload: Any) -> list[str]:
    if isinstance(payload, dict):
        return [str(key) for key in payload]
    if isinstance(payload, list):
        return [str(index) for index in range(len(payload))]
    return []


def build_debug_info(payload: Any) -> RocketRezDebugInfo:
    """Key names and a short serialized prefix of the raw upstream payload."""
    raw = json.dumps(payload, separators=(",", ":"), ensure_ascii=False, default=str)
    return RocketRezDebugInfo(
        original_data_keys=top_level_keys(payload),
        raw_data_preview=raw[:RAW_PREVIEW_MAX_CHARS],
    )
