"""
Core service for the RocketRez tour schedule API.
Builds the authenticated upstream request and returns the parsed JSON body.
"""

from __future__ import annotations

import base64
import json
from typing import Any
from urllib.parse import urlencode

from api.rocketrez.models import (
    ROCKETREZ_BASE_URL,
    TOUR_SCHEDULES_ENDPOINT,
    USER_AGENT,
    RocketRezUpstreamError,
)
from utils.base_api_client import BaseAPIClient
from utils.get_logger import get_logger

logger = get_logger(__name__)


class RocketRezService(BaseAPIClient):
    """
    Thin client for GET /tourschedules.

    Credentials are supplied per call and forwarded as HTTP Basic auth;
    nothing is stored on the instance between requests.
    """

    def __init__(self, base_url: str = ROCKETREZ_BASE_URL):
        self.base_url = base_url.rstrip("/")

    def build_schedule_url(self, site_id: str, selected_date: str) -> str:
        query = urlencode({"SiteId": site_id, "SelectedDate": selected_date})
        return f"{self.base_url}{TOUR_SCHEDULES_ENDPOINT}?{query}"

    @staticmethod
    def build_headers(username: str, password: str) -> dict[str, str]:
        """Request headers with `Authorization: Basic base64(username:password)`."""
        credentials = base64.b64encode(f"{username}:{password}".encode()).decode("ascii")
        return {
            "Authorization": f"Basic {credentials}",
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        }

    async def get_tour_schedules(
        self,
        site_id: str,
        selected_date: str,
        username: str,
        password: str,
    ) -> Any:
        """
        Fetch the raw tour schedule payload for one site and date.

        Raises:
            RocketRezUpstreamError: RocketRez answered with a non-2xx status
            ValueError: the success body is not valid JSON
            aiohttp.ClientError: the request could not be completed
        """
        url = self.build_schedule_url(site_id, selected_date)
        logger.info(f"Fetching: {url}")

        response = await self._core_async_fetch(
            url=url, headers=self.build_headers(username, password)
        )
        logger.info(f"Response: {response.status} {response.reason}")

        if not response.ok:
            logger.error(f"RocketRez error: {response.text}")
            raise RocketRezUpstreamError(
                status=response.status,
                reason=response.reason,
                details=response.text,
                url=url,
            )

        data = json.loads(response.text)
        keys = list(data.keys()) if isinstance(data, dict) else []
        logger.info(f"Data keys: {keys}")
        return data
