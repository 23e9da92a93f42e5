"""
Cloud Functions entry point for the RocketRez tour schedule proxy.

Deploy with the Firebase CLI; each decorated function below becomes an
HTTPS endpoint.
"""

import asyncio

from firebase_functions import https_fn, options

from utils.setup_logging import setup_cloud_logging

setup_cloud_logging()

from api.rocketrez.handlers import rocketrez_handler  # noqa: E402


@https_fn.on_request(
    memory=options.MemoryOption.MB_256,
    min_instances=0,
)
def get_rocketrez_schedules(req: https_fn.Request) -> https_fn.Response:
    """
    Proxy RocketRez tour schedules to the browser.

    Usage:
        GET /get_rocketrez_schedules?username=<user>&password=<pw>
        GET /get_rocketrez_schedules?username=<user>&password=<pw>&siteId=2&date=2025-05-27
    """
    return asyncio.run(rocketrez_handler.get_tour_schedules(req))
