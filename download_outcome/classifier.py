import asyncio
from dataclasses import dataclass
from typing import Optional

from .exceptions import Category

PATTERNS_VERSION = "1"

# Checked in this order; the first category with a matching substring wins.
# "504"/"408" are timeouts, while "502"/"503" stay HTTP errors.
PATTERNS = {
    Category.TIMEOUT: (
        "timeout",
        "timed out",
        "time out",
        "connection timed out",
        "request timeout",
        "gateway timeout",
        "504",
        "408",
    ),
    Category.CONNECTIVITY: (
        "resolve",
        "connection",
        "network",
        "internet",
        "dns",
        "refused",
        "unreachable",
        "host",
    ),
    Category.HTTP: (
        "http error",
        "status code",
        "400",
        "401",
        "403",
        "404",
        "500",
        "502",
        "503",
    ),
}

PREFIXES = {
    Category.TIMEOUT: "Server timeout: ",
    Category.CONNECTIVITY: "Network connectivity issue: ",
    Category.HTTP: "HTTP error: ",
    Category.UNKNOWN: "API error: ",
}

UNKNOWN_ERROR = "Unknown error"


@dataclass(frozen=True)
class Verdict:
    category: Category
    exit_code: int
    message: str

    @property
    def is_timeout(self) -> bool:
        return self.category is Category.TIMEOUT


def _matches(category: Category, value) -> bool:
    if not isinstance(value, str):
        return False
    lowered = value.lower()
    return any(p in lowered for p in PATTERNS[category])


def is_timeout_error(error_message) -> bool:
    return _matches(Category.TIMEOUT, error_message)


def is_connectivity_error(error_message) -> bool:
    return _matches(Category.CONNECTIVITY, error_message)


def is_http_error(error_message) -> bool:
    return _matches(Category.HTTP, error_message)


def _verdict(category: Category, error_message) -> Verdict:
    return Verdict(
        category=category,
        exit_code=category.exit_code,
        message=f"{PREFIXES[category]}{error_message}",
    )


def classify(error_message: Optional[str]) -> Verdict:
    """
    Classifies a raw error message into a Verdict.
    Never raises: anything that matches no pattern set is UNKNOWN.
    """
    if error_message is None:
        error_message = UNKNOWN_ERROR

    for category in PATTERNS:
        if _matches(category, error_message):
            return _verdict(category, error_message)
    return _verdict(Category.UNKNOWN, error_message)


def classify_exception(exc: BaseException) -> Verdict:
    """
    Classifies a raised exception. Timeout exceptions are timeouts regardless
    of their text, which is frequently empty.
    """
    text = str(exc) or type(exc).__name__
    if isinstance(exc, (TimeoutError, asyncio.TimeoutError)):
        return _verdict(Category.TIMEOUT, text)
    return classify(text)
