"""Pytest configuration and fixtures for RocketRez tests."""

import os
from datetime import UTC, datetime
from unittest.mock import MagicMock

import pytest
from dotenv import find_dotenv, load_dotenv
from firebase_functions import https_fn

from api.rocketrez.core import RocketRezService
from api.rocketrez.wrappers import RocketRezWrapper

# Integration tests read ROCKETREZ_USERNAME / ROCKETREZ_PASSWORD from a local .env
if not os.getenv("ROCKETREZ_USERNAME"):
    load_dotenv(find_dotenv(usecwd=True), override=False)

FIXED_NOW = datetime(2030, 6, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def fixed_now() -> datetime:
    """Reference instant used for the past-tour filter in unit tests."""
    return FIXED_NOW


@pytest.fixture
def rocketrez_service():
    return RocketRezService()


@pytest.fixture
def rocketrez_wrapper(rocketrez_service):
    """Wrapper bound to its own service so tests can patch it freely."""
    return RocketRezWrapper(service=rocketrez_service)


@pytest.fixture
def mock_request():
    """Create a mock Firebase Functions Request object."""

    def _create_mock_request(args: dict[str, str] | None = None, method: str = "GET"):
        mock_req = MagicMock(spec=https_fn.Request)
        mock_req.method = method
        mock_req.args = dict(args or {})
        return mock_req

    return _create_mock_request


@pytest.fixture
def credentials():
    return {"username": "wendella", "password": "s3cret"}


@pytest.fixture
def mock_sites_response():
    """Mock tourschedules response using the Sites envelope and PascalCase fields."""
    return {
        "Sites": [
            {
                "SiteId": 2,
                "Schedules": [
                    {
                        "ScheduleId": 9002,
                        "TourId": 41,
                        "TourName": "Sunset Cruise",
                        "StartTime": "2030-06-01T19:30:00",
                        "EndTime": "2030-06-01T21:00:00",
                        "Available": "42",
                        "Duration": "90",
                        "CustomFieldValue1": "Departs from Michigan Ave",
                        "CustomFieldValue2": "Bar on board",
                    },
                    {
                        "ScheduleId": 9001,
                        "TourId": 40,
                        "TourName": "Architecture Tour",
                        "StartTime": "2030-06-01T13:00:00",
                        "EndTime": "2030-06-01T14:15:00",
                        "Available": 12,
                    },
                    {
                        "ScheduleId": 9000,
                        "TourId": 40,
                        "TourName": "Architecture Tour",
                        "StartTime": "2030-06-01T10:00:00",
                        "EndTime": "2030-06-01T11:15:00",
                        "Available": 0,
                    },
                    {
                        "ScheduleId": 9003,
                        "TourId": 77,
                        "TourName": "PRIVATE Charter - Smith Wedding",
                        "StartTime": "2030-06-01T18:00:00",
                        "EndTime": "2030-06-01T20:00:00",
                        "Available": 0,
                    },
                ],
            }
        ]
    }
