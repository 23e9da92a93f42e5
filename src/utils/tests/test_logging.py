"""Unit tests for logger helpers."""

import logging

import pytest

from utils.get_logger import LocalTimeFormatter, get_logger
from utils.setup_logging import CloudLoggingHandler, setup_cloud_logging

pytestmark = pytest.mark.unit


def test_get_logger_is_cached():
    first = get_logger("rocketrez.test_cache")
    second = get_logger("rocketrez.test_cache")

    assert first is second
    assert len(first.handlers) == 1
    assert isinstance(first.handlers[0].formatter, LocalTimeFormatter)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_cloud_logging_deployed(monkeypatch, restore_root_logger, capsys):
    for name in ("FIRESTORE_EMULATOR_HOST", "FIREBASE_AUTH_EMULATOR_HOST", "FUNCTIONS_EMULATOR"):
        monkeypatch.delenv(name, raising=False)

    root = setup_cloud_logging()
    logging.getLogger("api.rocketrez.handlers").info("handled")

    assert isinstance(root.handlers[0], CloudLoggingHandler)
    assert "INFO: api.rocketrez.handlers: handled" in capsys.readouterr().out


def test_setup_cloud_logging_emulator(monkeypatch, restore_root_logger):
    monkeypatch.setenv("FUNCTIONS_EMULATOR", "true")

    root = setup_cloud_logging()

    assert not isinstance(root.handlers[0], CloudLoggingHandler)
    assert isinstance(root.handlers[0], logging.StreamHandler)
