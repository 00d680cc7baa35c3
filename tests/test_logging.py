"""Tests for structlog configuration."""

import json
import logging
from collections.abc import Iterator

import pytest
import structlog

from rekro.logging import bind_request_context, clear_request_context, configure_logging, get_logger


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    yield
    clear_request_context()
    structlog.reset_defaults()


class TestConfigureLogging:
    def test_json_output_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(json_output=True)
        get_logger("test").info("quote_ready", total=412.5)
        captured = capsys.readouterr()
        event = json.loads(captured.err)
        assert event["event"] == "quote_ready"
        assert event["total"] == 412.5
        assert event["level"] == "info"
        assert "timestamp" in event
        assert captured.out == ""

    def test_level_filters_events(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(json_output=True, level="warning")
        get_logger("test").info("too_quiet")
        assert capsys.readouterr().err == ""

    def test_accepts_logging_constants(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(json_output=True, level=logging.DEBUG)
        get_logger("test").debug("verbose")
        assert json.loads(capsys.readouterr().err)["event"] == "verbose"


class TestRequestContext:
    def test_bound_values_added_until_cleared(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(json_output=True)
        logger = get_logger("test")

        bind_request_context(request_id="r-1")
        logger.info("inside")
        clear_request_context()
        logger.info("outside")

        inside, outside = (json.loads(line) for line in capsys.readouterr().err.splitlines())
        assert inside["request_id"] == "r-1"
        assert "request_id" not in outside
