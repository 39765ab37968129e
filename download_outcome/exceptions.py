from enum import Enum


# Exit codes
EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_TIMEOUT = 2


class Category(str, Enum):
    """Error taxonomy for failed downloads."""

    TIMEOUT = "timeout"
    CONNECTIVITY = "connectivity"
    HTTP = "http"
    UNKNOWN = "unknown"

    @property
    def exit_code(self) -> int:
        return EXIT_TIMEOUT if self is Category.TIMEOUT else EXIT_ERROR

    @property
    def is_transient(self) -> bool:
        return self in TRANSIENT_CATEGORIES


# Categories a caller may reasonably retry
TRANSIENT_CATEGORIES = frozenset({Category.TIMEOUT, Category.CONNECTIVITY})


class DownloadFailedError(Exception):
    def __init__(self, category, exit_code, message):
        self.category = category
        self.exit_code = exit_code
        super().__init__(message)
