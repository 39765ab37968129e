import structlog
import logging
import sys
from datetime import datetime
from enum import Enum

from .config import Settings, settings as default_settings

# Line format consumed by downstream log scrapers:
# "YYYY-MM-DD HH:MM:SS TZ [LEVEL] - message"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S %Z"


class LogLevel(str, Enum):
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"

    @classmethod
    def parse(cls, level) -> "LogLevel":
        if isinstance(level, cls):
            return level
        try:
            return cls(str(level).upper())
        except ValueError:
            raise ValueError(f"Unsupported log level: {level!r}") from None


def format_timestamp(moment: datetime) -> str:
    return moment.astimezone().strftime(TIMESTAMP_FORMAT)


def add_local_timestamp(logger, method_name, event_dict):
    event_dict["timestamp"] = format_timestamp(datetime.now())
    return event_dict


def render_line(logger, method_name, event_dict):
    return f"{event_dict['timestamp']} [{event_dict['level']}] - {event_dict['event']}"


class LineLogger:
    """
    Writes timestamped, level-tagged lines to a diagnostic stream.
    """

    def __init__(self, verbose: bool = True, stream=None):
        self.verbose = verbose
        self.stream = stream

    @classmethod
    def from_settings(cls, settings: Settings = None, stream=None) -> "LineLogger":
        settings = settings or default_settings
        return cls(verbose=settings.log_verbose, stream=stream)

    def log(self, message: str, level=LogLevel.INFO) -> None:
        if not self.verbose:
            return
        level = LogLevel.parse(level)

        # Resolved per call so redirected stderr is honoured
        stream = self.stream if self.stream is not None else sys.stderr
        line_logger = structlog.wrap_logger(
            structlog.PrintLogger(file=stream),
            processors=[add_local_timestamp, render_line],
            wrapper_class=structlog.BoundLogger,
            context_class=dict,
        )
        line_logger.msg(message, level=level.value)

    def info(self, message: str) -> None:
        self.log(message, LogLevel.INFO)

    def warning(self, message: str) -> None:
        self.log(message, LogLevel.WARNING)

    def error(self, message: str) -> None:
        self.log(message, LogLevel.ERROR)


def log(message: str, level=LogLevel.INFO, verbose: bool = True, stream=None) -> None:
    LineLogger(verbose=verbose, stream=stream).log(message, level)


def configure_logger(settings: Settings = None):
    """
    Configures structlog to work with standard logging.
    Outputs JSON in production, and ConsoleRenderer in development.
    """
    settings = settings or default_settings

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if settings.env == "development":
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Route standard logging to the same stream
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
    )
