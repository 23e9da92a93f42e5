"""
Pydantic models and constants for the RocketRez tour schedule proxy.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from utils.pydantic_tools import BaseModelWithMethods


class RocketRezUpstreamError(Exception):
    """
    Raised when the RocketRez API answers with a non-success status.

    The handler mirrors `status` back to the caller and includes a truncated
    copy of `details` (the upstream body text).
    """

    def __init__(self, status: int, reason: str, details: str, url: str):
        super().__init__(f"RocketRez API returned {status}")
        self.status = status
        self.reason = reason
        self.details = details
        self.url = url


ROCKETREZ_BASE_URL = "https://secure.rocket-rez.com/RocketAPI/v1"
TOUR_SCHEDULES_ENDPOINT = "/tourschedules"

DEFAULT_SITE_ID = "2"
USER_AGENT = "Wendella-Proxy/1.0"
SOURCE_LABEL = "RocketRez via Cloud Functions"
USAGE_HINT = "?username=your_user&password=your_pass&siteId=2&date=YYYY-MM-DD"

DEFAULT_DURATION_MINUTES = 75

# Lower-cased substrings that mark non-public or non-operational tour slots
EXCLUDED_NAME_TERMS = ("private", "canceled", "cancelled", "test")

# Truncation lengths for error and diagnostic payloads
ERROR_DETAILS_MAX_CHARS = 300
RAW_PREVIEW_MAX_CHARS = 200


class RocketRezCustomFields(BaseModelWithMethods):
    """The four custom field slots RocketRez exposes per schedule, values as sent."""

    field1: Any = ""
    field2: Any = ""
    field3: Any = ""
    field4: Any = ""


class RocketRezSchedule(BaseModelWithMethods):
    """A normalized, publicly bookable tour departure."""

    tour_name: str = Field(alias="tourName", min_length=1)
    start_time: str = Field(alias="startTime", min_length=1)
    end_time: str = Field(alias="endTime")
    available: int = 0
    duration: int = DEFAULT_DURATION_MINUTES
    schedule_id: Any | None = Field(default=None, alias="scheduleId")
    tour_id: Any | None = Field(default=None, alias="tourId")
    custom_fields: RocketRezCustomFields = Field(
        default_factory=RocketRezCustomFields, alias="customFields"
    )


class RocketRezDebugInfo(BaseModelWithMethods):
    """Diagnostics about the raw upstream payload. Not a stable contract."""

    original_data_keys: list[str] = Field(default_factory=list, alias="originalDataKeys")
    raw_data_preview: str = Field(default="", alias="rawDataPreview")


class RocketRezScheduleResponse(BaseModelWithMethods):
    """Success body returned to the browser client."""

    success: bool = True
    data: list[RocketRezSchedule] = Field(default_factory=list)
    last_updated: str = Field(alias="lastUpdated")
    total_schedules: int = Field(default=0, alias="totalSchedules")
    source: str = SOURCE_LABEL
    debug_info: RocketRezDebugInfo | None = Field(default=None, alias="debugInfo")
