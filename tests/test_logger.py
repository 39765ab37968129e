import io
import json
import logging
import re

import pytest
import structlog

from download_outcome.config import Settings
from download_outcome.logger import LineLogger, LogLevel, configure_logger, log

LINE_RE = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2} \S+ \[(INFO|WARNING|ERROR)\] - (.*)$")


@pytest.mark.parametrize("level", ["INFO", "WARNING", "ERROR"])
def test_log_writes_formatted_line_to_stderr(capsys, level):
    log("Test message", level, True)

    captured = capsys.readouterr()
    assert captured.out == ""
    match = LINE_RE.match(captured.err.rstrip("\n"))
    assert match, captured.err
    assert match.group(1) == level
    assert match.group(2) == "Test message"


def test_log_defaults_to_info(capsys):
    log("hello")
    assert "[INFO] - hello" in capsys.readouterr().err


def test_log_silent_when_not_verbose(capsys):
    log("Test message", "INFO", False)
    assert capsys.readouterr().err == ""


def test_log_accepts_enum_and_lowercase_levels():
    stream = io.StringIO()
    log("a", LogLevel.WARNING, stream=stream)
    log("b", "error", stream=stream)

    lines = stream.getvalue().splitlines()
    assert "[WARNING] - a" in lines[0]
    assert "[ERROR] - b" in lines[1]


def test_log_rejects_unknown_level():
    with pytest.raises(ValueError):
        log("oops", "DEBUG", stream=io.StringIO())


def test_line_logger_helpers():
    stream = io.StringIO()
    line_logger = LineLogger(stream=stream)

    line_logger.info("one")
    line_logger.warning("two")
    line_logger.error("three")

    lines = stream.getvalue().splitlines()
    assert len(lines) == 3
    assert [LINE_RE.match(line).group(1) for line in lines] == ["INFO", "WARNING", "ERROR"]


def test_line_logger_from_settings():
    stream = io.StringIO()
    quiet = LineLogger.from_settings(Settings(log_verbose=False), stream=stream)
    quiet.error("hidden")
    assert stream.getvalue() == ""

    loud = LineLogger.from_settings(Settings(log_verbose=True), stream=stream)
    loud.error("shown")
    assert "[ERROR] - shown" in stream.getvalue()


def test_configure_logger_production_renders_json(capsys):
    logging.root.handlers = []
    configure_logger(Settings(env="production"))

    structlog.get_logger("app").info("direct_message", key="value")

    captured = capsys.readouterr()
    data = json.loads(captured.out.strip().splitlines()[-1])
    assert data["event"] == "direct_message"
    assert data["key"] == "value"
    assert data["level"] == "info"
    assert data["logger"] == "app"
    assert "timestamp" in data


def test_configure_logger_development_renders_console(capsys):
    logging.root.handlers = []
    configure_logger(Settings(env="development"))

    structlog.get_logger("app").info("console_message", key="value")

    output = capsys.readouterr().out
    assert "console_message" in output
    assert "key" in output
    assert "value" in output


def test_configure_logger_sets_root_level():
    logging.root.handlers = []
    configure_logger(Settings(log_level="warning"))
    assert logging.root.level == logging.WARNING


def test_configure_logger_keeps_existing_root_handlers():
    existing = logging.StreamHandler(io.StringIO())
    logging.root.handlers = [existing]

    configure_logger(Settings(env="production"))

    assert logging.root.handlers == [existing]


def test_log_unknown_level_is_silent_when_not_verbose(capsys):
    log("x", "DEBUG", False)
    LineLogger(verbose=False).log("x", "TRACE")

    assert capsys.readouterr().err == ""
