"""
RocketRez integration package.

Provides:
- Core service for the RocketRez tourschedules endpoint
- Normalizer that unwraps and filters raw schedule payloads
- Wrapper that packages normalized schedules for the browser client
- HTTP handlers exposed via Firebase Functions
"""

from api.rocketrez.core import RocketRezService
from api.rocketrez.handlers import RocketRezHandler, rocketrez_handler
from api.rocketrez.models import (
    DEFAULT_SITE_ID,
    EXCLUDED_NAME_TERMS,
    RocketRezCustomFields,
    RocketRezDebugInfo,
    RocketRezSchedule,
    RocketRezScheduleResponse,
    RocketRezUpstreamError,
)
from api.rocketrez.normalizer import EnvelopeShape, detect_envelope, normalize_schedules
from api.rocketrez.wrappers import RocketRezWrapper, rocketrez_wrapper

__all__ = [
    "RocketRezService",
    "RocketRezHandler",
    "rocketrez_handler",
    "RocketRezWrapper",
    "rocketrez_wrapper",
    "RocketRezSchedule",
    "RocketRezCustomFields",
    "RocketRezDebugInfo",
    "RocketRezScheduleResponse",
    "RocketRezUpstreamError",
    "DEFAULT_SITE_ID",
    "EXCLUDED_NAME_TERMS",
    "EnvelopeShape",
    "detect_envelope",
    "normalize_schedules",
]
