"""
Async wrapper that turns a RocketRez fetch into the proxy's response model.
"""

from __future__ import annotations

from datetime import UTC, datetime

from api.rocketrez.core import RocketRezService
from api.rocketrez.models import SOURCE_LABEL, RocketRezScheduleResponse
from api.rocketrez.normalizer import normalize_schedules
from api.rocketrez.utils import build_debug_info, utc_timestamp
from utils.get_logger import get_logger

logger = get_logger(__name__)


class RocketRezWrapper:
    """Fetches, normalizes and packages tour schedules for one request."""

    def __init__(self, service: RocketRezService | None = None):
        self.service = service or RocketRezService()

    async def get_tour_schedules(
        self,
        site_id: str,
        selected_date: str,
        username: str,
        password: str,
        now: datetime | None = None,
    ) -> RocketRezScheduleResponse:
        """
        Get upcoming public tour schedules for a site and date.

        Upstream and transport errors are not caught here; the handler maps
        them to HTTP responses.

        Args:
            site_id: RocketRez site identifier
            selected_date: Date in YYYY-MM-DD format
            username: RocketRez API user
            password: RocketRez API password
            now: Reference instant for the past-tour filter (default: current UTC time)

        Returns:
            RocketRezScheduleResponse with the normalized schedules
        """
        payload = await self.service.get_tour_schedules(
            site_id=site_id,
            selected_date=selected_date,
            username=username,
            password=password,
        )

        now = now or datetime.now(UTC)
        schedules = normalize_schedules(payload, now=now)

        return RocketRezScheduleResponse(
            success=True,
            data=schedules,
            last_updated=utc_timestamp(now),
            total_schedules=len(schedules),
            source=SOURCE_LABEL,
            debug_info=build_debug_info(payload),
        )


rocketrez_wrapper = RocketRezWrapper()
