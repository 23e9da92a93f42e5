"""
Normalization of RocketRez tour schedule payloads.

RocketRez has been seen returning the schedule list under several envelope
shapes and with several field casings. This module unwraps whichever envelope
is present, maps each entry onto RocketRezSchedule and drops entries that are
incomplete, already over, or not open to the public.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum
from typing import Any

from pydantic import ValidationError

from api.rocketrez.models import (
    DEFAULT_DURATION_MINUTES,
    EXCLUDED_NAME_TERMS,
    RocketRezCustomFields,
    RocketRezSchedule,
)
from utils.get_logger import get_logger

logger = get_logger(__name__)


# ----------------------------------------------------------
# Envelope detection
# ----------------------------------------------------------
class EnvelopeShape(Enum):
    """Top-level structures RocketRez uses to wrap the schedule list."""

    LIST = "list"
    SITES = "Sites"
    SCHEDULES_LOWER = "schedules"
    SCHEDULES = "Schedules"
    DATA = "data"
    UNKNOWN = "unknown"


# Keyed shapes in the order they are tried; the first key holding a value wins
KEYED_ENVELOPE_PRECEDENCE = (
    EnvelopeShape.SITES,
    EnvelopeShape.SCHEDULES_LOWER,
    EnvelopeShape.SCHEDULES,
    EnvelopeShape.DATA,
)


def _holds_envelope(value: Any) -> bool:
    """Containers always count, even when empty; scalars only when truthy."""
    return isinstance(value, (list, dict)) or bool(value)


def _unwrap_sites(value: Any) -> Any:
    site = value if not isinstance(value, list) else (value[0] if value else None)
    if not isinstance(site, dict):
        return []
    return site.get("Schedules") or []


def _unwrap_data(value: Any) -> Any:
    return value if isinstance(value, list) else [value]


def _unwrap_list(value: Any) -> Any:
    return value


_UNWRAPPERS = {
    EnvelopeShape.SITES: _unwrap_sites,
    EnvelopeShape.SCHEDULES_LOWER: _unwrap_list,
    EnvelopeShape.SCHEDULES: _unwrap_list,
    EnvelopeShape.DATA: _unwrap_data,
}


def detect_envelope(payload: Any) -> tuple[EnvelopeShape, list[Any]]:
    """
    Identify the envelope shape of a raw payload and return its schedule entries.

    A bare JSON array is used as-is. For objects, the keys in
    KEYED_ENVELOPE_PRECEDENCE are tried in order and the first one holding a
    value decides the shape, even if what it holds turns out not to be a list
    (the entries are then empty). Null, empty-string, zero and false values
    fall through to the next key; an empty list or object still matches.
    """
    if isinstance(payload, list):
        return EnvelopeShape.LIST, payload

    if isinstance(payload, dict):
        for shape in KEYED_ENVELOPE_PRECEDENCE:
            value = payload.get(shape.value)
            if not _holds_envelope(value):
                continue
            entries = _UNWRAPPERS[shape](value)
            if not isinstance(entries, list):
                logger.info(f"{shape.value} envelope does not hold a list, returning no schedules")
                return shape, []
            return shape, entries

    return EnvelopeShape.UNKNOWN, []


# ----------------------------------------------------------
# Field resolution
# ----------------------------------------------------------
@dataclass(frozen=True)
class FieldChain:
    """Candidate keys for one logical field, checked in order."""

    keys: tuple[str, ...]

    def resolve(self, item: dict[str, Any], default: Any = None) -> Any:
        """Return the first non-empty value among the candidate keys."""
        for key in self.keys:
            value = item.get(key)
            if value:
                return value
        return default


TOUR_NAME = FieldChain(("TourName", "tourName", "name", "title"))
START_TIME = FieldChain(("StartTime", "startTime", "start"))
END_TIME = FieldChain(("EndTime", "endTime", "end"))
AVAILABLE = FieldChain(("Available", "available", "seats"))
DURATION = FieldChain(("Duration", "duration"))
SCHEDULE_ID = FieldChain(("ScheduleId", "scheduleId", "id"))
TOUR_ID = FieldChain(("TourId", "tourId"))
CUSTOM_FIELDS = (
    FieldChain(("CustomFieldValue1", "description")),
    FieldChain(("CustomFieldValue2",)),
    FieldChain(("CustomFieldValue3",)),
    FieldChain(("CustomFieldValue4",)),
)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int(value: Any) -> int:
    """
    Parse a count the way RocketRez sends them: ints, floats or numeric strings.

    Strings only need to start with an integer ("12 seats" -> 12).
    Raises ValueError/TypeError for anything else.
    """
    if isinstance(value, bool):
        raise TypeError("expected a number, got a boolean")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match is None:
            raise ValueError(f"not an integer: {value!r}")
        return int(match.group(1))
    raise TypeError(f"expected a number, got {type(value).__name__}")


def parse_timestamp(value: Any) -> datetime:
    """
    Parse an ISO-8601 timestamp into an aware datetime.

    A trailing "Z" is accepted. Timestamps without an offset are taken as UTC.
    """
    if not isinstance(value, str):
        raise TypeError(f"expected a timestamp string, got {type(value).__name__}")
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def is_excluded_tour_name(tour_name: str) -> bool:
    """True for private, canceled or test departures."""
    name = tour_name.lower()
    return any(term in name for term in EXCLUDED_NAME_TERMS)


# ----------------------------------------------------------
# Per-entry normalization
# ----------------------------------------------------------
@dataclass(frozen=True)
class ScheduleOutcome:
    """Result of normalizing one raw entry: a schedule, or the reason it was skipped."""

    index: int
    schedule: RocketRezSchedule | None = None
    starts_at: datetime | None = None
    skip_reason: str | None = None

    @property
    def ok(self) -> bool:
        return self.schedule is not None

    @classmethod
    def skipped(cls, index: int, reason: str) -> ScheduleOutcome:
        return cls(index=index, skip_reason=reason)


def normalize_entry(index: int, item: Any, now: datetime) -> ScheduleOutcome:
    """Map one raw entry onto a RocketRezSchedule, or explain why it was dropped."""
    if not isinstance(item, dict):
        return ScheduleOutcome.skipped(index, f"entry is a {type(item).__name__}, not an object")

    tour_name = TOUR_NAME.resolve(item)
    start_time = START_TIME.resolve(item)
    if not tour_name or not start_time:
        return ScheduleOutcome.skipped(index, "missing tourName or startTime")

    try:
        if not isinstance(tour_name, str):
            raise TypeError(f"tour name is a {type(tour_name).__name__}")

        end_time = END_TIME.resolve(item)
        starts_at = parse_timestamp(start_time)
        ends_at = parse_timestamp(end_time) if end_time else starts_at

        if ends_at < now:
            return ScheduleOutcome.skipped(index, f"ended at {ends_at.isoformat()}")

        if is_excluded_tour_name(tour_name):
            return ScheduleOutcome.skipped(index, f"excluded tour name {tour_name!r}")

        schedule = RocketRezSchedule(
            tour_name=tour_name,
            start_time=start_time,
            end_time=end_time or start_time,
            available=parse_int(AVAILABLE.resolve(item, 0)),
            duration=parse_int(DURATION.resolve(item, DEFAULT_DURATION_MINUTES)),
            schedule_id=SCHEDULE_ID.resolve(item),
            tour_id=TOUR_ID.resolve(item),
            custom_fields=RocketRezCustomFields(
                field1=CUSTOM_FIELDS[0].resolve(item, ""),
                field2=CUSTOM_FIELDS[1].resolve(item, ""),
                field3=CUSTOM_FIELDS[2].resolve(item, ""),
                field4=CUSTOM_FIELDS[3].resolve(item, ""),
            ),
        )
    except (TypeError, ValueError, OverflowError, ValidationError) as exc:
        return ScheduleOutcome.skipped(index, f"malformed entry: {exc}")

    return ScheduleOutcome(index=index, schedule=schedule, starts_at=starts_at)


def normalize_schedules(payload: Any, now: datetime | None = None) -> list[RocketRezSchedule]:
    """
    Turn a raw RocketRez payload into upcoming public schedules, earliest first.

    Args:
        payload: Parsed JSON body from the tourschedules endpoint
        now: Reference instant for dropping past tours (default: current UTC time)

    Returns:
        List of RocketRezSchedule sorted ascending by start time
    """
    if now is None:
        now = datetime.now(UTC)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=UTC)

    shape, entries = detect_envelope(payload)
    logger.debug(f"Detected {shape.value} envelope with {len(entries)} entries")

    outcomes = [normalize_entry(index, item, now) for index, item in enumerate(entries)]

    kept: list[ScheduleOutcome] = []
    for outcome in outcomes:
        if outcome.ok:
            kept.append(outcome)
        else:
            logger.debug(f"Skipping item {outcome.index}: {outcome.skip_reason}")

    kept.sort(key=lambda outcome: outcome.starts_at)

    logger.info(f"Processed {len(kept)} valid schedules out of {len(entries)}")
    return [outcome.schedule for outcome in kept if outcome.schedule is not None]
