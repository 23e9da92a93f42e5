"""
Custom logging setup for Firebase Cloud Functions.

This module configures the Python logging system to output via print()
which is automatically captured by Cloud Logging in deployed Cloud Functions.

Call setup_cloud_logging() at the top of main.py to configure logging for all modules.
"""

import logging
import os
import sys


class CloudLoggingHandler(logging.Handler):
    """
    Logging handler that writes to stdout via print().
    Cloud Functions captures stdout and forwards it to Cloud Logging.
    """

    def emit(self, record):
        try:
            msg = self.format(record)
            print(msg, file=sys.stdout)
        except Exception:
            self.handleError(record)


class CloudLoggingFormatter(logging.Formatter):
    """Prefixes each message with its level so Cloud Logging can be filtered by it."""

    def format(self, record):
        message = super().format(record)
        return f"{record.levelname}: {message}"


def is_emulator() -> bool:
    """True when running under the Firebase emulator suite."""
    return bool(
        os.getenv("FIRESTORE_EMULATOR_HOST")
        or os.getenv("FIREBASE_AUTH_EMULATOR_HOST")
        or os.getenv("FUNCTIONS_EMULATOR")
    )


def setup_cloud_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Configure the root logger for the function runtime.

    Under the emulator a plain stream handler is used; deployed functions get
    the print-based CloudLoggingHandler. Returns the configured root logger.
    """
    emulator = is_emulator()

    root_logger = logging.getLogger()

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler: logging.Handler
    if emulator:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter("%(levelname)-8s %(name)s: %(message)s")
    else:
        handler = CloudLoggingHandler()
        formatter = CloudLoggingFormatter("%(name)s: %(message)s")

    handler.setFormatter(formatter)
    handler.setLevel(level)
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    if emulator:
        root_logger.info("Logging configured for emulator (standard logging)")
    else:
        root_logger.info("Logging configured for Cloud Functions (print-based)")
    return root_logger
