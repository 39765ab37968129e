"""
Uniform outcome records for download operations.

Callers classify a failure first and feed the verdict into the builder;
result_from_error/result_from_exception do both steps.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from .classifier import PREFIXES, UNKNOWN_ERROR, Verdict, classify, classify_exception
from .exceptions import (
    EXIT_ERROR,
    EXIT_SUCCESS,
    EXIT_TIMEOUT,
    Category,
    DownloadFailedError,
)
from .logger import format_timestamp


def _now() -> datetime:
    return datetime.now().astimezone()


@dataclass(frozen=True)
class OutcomeRecord:
    """
    Result of a download-like operation.

    Attributes:
        success: Whether the operation completed without error
        payload: Tabular data (only on success)
        exit_code: 0 success, 1 generic failure, 2 timeout
        message: Human-readable description, never empty on failure
        checksum: Digest of the payload, if the caller computed one
        is_timeout: Whether the failure was classified as a timeout
        category: Failure category, None on success
        created_at: Local, timezone-aware construction time
    """
    success: bool
    payload: Any = None
    exit_code: int = EXIT_SUCCESS
    message: str = ""
    checksum: Optional[str] = None
    is_timeout: bool = False
    category: Optional[Category] = None
    created_at: datetime = field(default_factory=_now)

    @property
    def row_count(self) -> Optional[int]:
        if self.payload is None:
            return None
        try:
            return len(self.payload)
        except TypeError:
            return None

    def summary(self) -> str:
        status = "SUCCESS" if self.success else "FAILED"
        lines = [
            f"Download Result: {status}",
            f"  Exit code: {self.exit_code}",
            f"  Message: {self.message}",
        ]
        if self.success and self.row_count is not None:
            lines.append(f"  Rows: {self.row_count}")
        if self.checksum is not None:
            lines.append(f"  Checksum: {self.checksum}")
        lines.append(f"  Timestamp: {format_timestamp(self.created_at)}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.summary()

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "exit_code": self.exit_code,
            "message": self.message,
            "checksum": self.checksum,
            "is_timeout": self.is_timeout,
            "category": self.category.value if self.category else None,
            "rows": self.row_count,
            "created_at": self.created_at.isoformat(),
        }

    def raise_for_status(self) -> None:
        if self.success:
            return
        raise DownloadFailedError(self.category or Category.UNKNOWN, self.exit_code, self.message)


def _coerce_category(category) -> Optional[Category]:
    if category is None or isinstance(category, Category):
        return category
    try:
        return Category(str(category).lower())
    except ValueError:
        return Category.UNKNOWN


def build_result(
    success: bool,
    payload=None,
    exit_code: int = EXIT_SUCCESS,
    message: str = "",
    checksum: Optional[str] = None,
    is_timeout: bool = False,
    category: Optional[Category] = None,
) -> OutcomeRecord:
    """
    Builds an OutcomeRecord, normalizing contradictory flags so that
    success <=> exit_code == 0 and is_timeout => exit_code == 2.
    Pure: never logs and never raises.
    """
    success = bool(success)
    category = _coerce_category(category)

    if success:
        exit_code = EXIT_SUCCESS
        is_timeout = False
        category = None
    else:
        payload = None
        checksum = None
        if category is Category.TIMEOUT or exit_code == EXIT_TIMEOUT:
            is_timeout = True
        if is_timeout:
            category = Category.TIMEOUT
            exit_code = EXIT_TIMEOUT
        else:
            exit_code = EXIT_ERROR
        if not message:
            message = f"{PREFIXES[Category.UNKNOWN]}{UNKNOWN_ERROR}"

    return OutcomeRecord(
        success=success,
        payload=payload,
        exit_code=int(exit_code),
        message=message,
        checksum=checksum,
        is_timeout=bool(is_timeout),
        category=category,
    )


def result_from_verdict(verdict: Verdict) -> OutcomeRecord:
    return build_result(
        success=False,
        exit_code=verdict.exit_code,
        message=verdict.message,
        is_timeout=verdict.is_timeout,
        category=verdict.category,
    )


def result_from_error(error_message: Optional[str]) -> OutcomeRecord:
    return result_from_verdict(classify(error_message))


def result_from_exception(exc: BaseException) -> OutcomeRecord:
    return result_from_verdict(classify_exception(exc))
