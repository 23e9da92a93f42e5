"""
Firebase HTTPS handlers for the RocketRez tour schedule proxy.
"""

import json
import logging
from typing import Any

from firebase_functions import https_fn

from api.rocketrez.models import (
    DEFAULT_SITE_ID,
    ERROR_DETAILS_MAX_CHARS,
    USAGE_HINT,
    RocketRezUpstreamError,
)
from api.rocketrez.utils import today_utc, utc_timestamp
from api.rocketrez.wrappers import RocketRezWrapper, rocketrez_wrapper

logger = logging.getLogger(__name__)

ALLOWED_METHODS = {"GET", "OPTIONS"}


class RocketRezHandler:
    """HTTP handler entrypoints for the RocketRez tour schedule proxy."""

    def __init__(self, wrapper: RocketRezWrapper | None = None):
        self.wrapper = wrapper or rocketrez_wrapper
        logger.info("RocketRezHandler initialized")

    async def get_tour_schedules(self, req: https_fn.Request) -> https_fn.Response:
        """
        Return upcoming public tour departures for a RocketRez site.

        Query Parameters:
            siteId: RocketRez site id (default: "2")
            date: Date in YYYY-MM-DD format (default: today, UTC)
            username: RocketRez API user (required)
            password: RocketRez API password (required)
        """
        if req.method == "OPTIONS":
            return https_fn.Response("", status=200, headers=self._cors_headers())

        if req.method not in ALLOWED_METHODS:
            return self._json_response({"error": "Method not allowed"}, status=405)

        params: Any = req.args or {}
        try:
            site_id = params.get("siteId", DEFAULT_SITE_ID)
            selected_date = params.get("date") or today_utc()
            username = params.get("username")
            password = params.get("password")

            if not username or not password:
                return self._json_response(
                    {
                        "error": "Missing required parameters: username, password",
                        "usage": USAGE_HINT,
                    },
                    status=400,
                )

            response = await self.wrapper.get_tour_schedules(
                site_id=site_id,
                selected_date=selected_date,
                username=username,
                password=password,
            )

            logger.info(
                "get_tour_schedules returning %d schedules (siteId=%s, date=%s)",
                response.total_schedules,
                site_id,
                selected_date,
            )
            return self._json_response(response.to_dict(), status=200)
        except RocketRezUpstreamError as exc:
            logger.error("RocketRez upstream error %s: %s", exc.status, exc.reason)
            return self._json_response(
                {
                    "error": str(exc),
                    "message": exc.reason,
                    "details": exc.details[:ERROR_DETAILS_MAX_CHARS],
                    "url": exc.url,
                    "timestamp": utc_timestamp(),
                },
                status=exc.status,
            )
        except Exception as exc:  # pylint: disable=broad-except
            logger.error("Proxy error: %s", exc, exc_info=True)
            return self._json_response(
                {
                    "error": "Proxy server error",
                    "message": str(exc) or type(exc).__name__,
                    "timestamp": utc_timestamp(),
                },
                status=500,
            )

    def _json_response(self, body: dict[str, Any], status: int) -> https_fn.Response:
        return https_fn.Response(
            json.dumps(body, default=str),
            status=status,
            headers=self._cors_headers(),
        )

    def _cors_headers(self) -> dict[str, Any]:
        return {
            "Access-Control-Allow-Origin": "*",
            "Access-Control-Allow-Methods": "GET, OPTIONS",
            "Access-Control-Allow-Headers": "Content-Type",
            "Content-Type": "application/json",
        }


rocketrez_handler = RocketRezHandler()
