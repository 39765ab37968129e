"""
Error classification and uniform outcome records for data downloads.
"""

from .exceptions import (  # noqa: F401
    EXIT_ERROR,
    EXIT_SUCCESS,
    EXIT_TIMEOUT,
    TRANSIENT_CATEGORIES,
    Category,
    DownloadFailedError,
)
from .classifier import (  # noqa: F401
    PATTERNS,
    PATTERNS_VERSION,
    Verdict,
    classify,
    classify_exception,
    is_connectivity_error,
    is_http_error,
    is_timeout_error,
)
from .result import (  # noqa: F401
    OutcomeRecord,
    build_result,
    result_from_error,
    result_from_exception,
    result_from_verdict,
)
from .logger import LineLogger, LogLevel, configure_logger, log  # noqa: F401

__all__ = [
    "EXIT_ERROR",
    "EXIT_SUCCESS",
    "EXIT_TIMEOUT",
    "TRANSIENT_CATEGORIES",
    "Category",
    "DownloadFailedError",
    "PATTERNS",
    "PATTERNS_VERSION",
    "Verdict",
    "classify",
    "classify_exception",
    "is_connectivity_error",
    "is_http_error",
    "is_timeout_error",
    "OutcomeRecord",
    "build_result",
    "result_from_error",
    "result_from_exception",
    "result_from_verdict",
    "LineLogger",
    "LogLevel",
    "configure_logger",
    "log",
]
