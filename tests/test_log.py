"""Tests for configure_logging."""

import io

import pytest
import structlog

from aiven_client import configure_logging


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


def test_logfmt_output(capsys):
    """Events are rendered as logfmt with level and message first."""
    configure_logging("INFO")

    structlog.get_logger("test").info("hello", endpoint="clouds")

    out = capsys.readouterr().out
    assert "level=info" in out
    assert "msg=hello" in out
    assert "endpoint=clouds" in out
    assert out.startswith("timestamp=")


def test_level_filtering(capsys):
    """Events below the configured level are dropped."""
    configure_logging("warning")
    logger = structlog.get_logger("test")

    logger.info("quiet")
    logger.warning("loud")

    out = capsys.readouterr().out
    assert "quiet" not in out
    assert "msg=loud" in out


def test_unknown_level_falls_back_to_info(capsys):
    """An unknown level name behaves like INFO."""
    configure_logging("chatty")
    logger = structlog.get_logger("test")

    logger.debug("hidden")
    logger.info("shown")

    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "msg=shown" in out


def test_custom_stream(capsys):
    """Lines go to the given stream instead of stdout."""
    stream = io.StringIO()
    configure_logging("DEBUG", stream=stream)

    structlog.get_logger("test").debug("request", method="GET")

    assert "level=debug msg=request method=GET" in stream.getvalue()
    assert capsys.readouterr().out == ""
