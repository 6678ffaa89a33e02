"""Error types for tagbind.

Expression building itself never raises: every descriptor and option
combination yields a string. Errors only surface from the locale registry
(strict lookups) and from loading external locale pattern files.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any


class ErrorCode(Enum):
    """Standard error codes, also used as CLI exit codes."""

    GENERAL_ERROR = 1
    USAGE_ERROR = 2

    # Locale errors (10-19)
    UNKNOWN_LOCALE = 10
    LOCALE_FILE_NOT_FOUND = 11
    LOCALE_FILE_INVALID = 12


class TagBindError(Exception):
    """Base exception for tagbind errors.

    Attributes:
        message: Error message
        code: Error code
        details: Additional error details
        hint: Helpful hint for resolution
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.GENERAL_ERROR,
        details: dict[str, Any] | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.hint = hint

    def __str__(self) -> str:
        parts = [self.message]
        if self.hint:
            parts.append(f"Hint: {self.hint}")
        return "\n".join(parts)


class UnknownLocaleError(TagBindError):
    """Raised by strict locale lookups when no pattern is registered."""

    def __init__(self, locale: str, hint: str | None = None) -> None:
        super().__init__(
            message=f"Unknown locale: {locale!r}",
            code=ErrorCode.UNKNOWN_LOCALE,
            details={"locale": locale},
            hint=hint or "Register the locale or load it from a pattern file.",
        )
        self.locale = locale


class LocaleFileError(TagBindError):
    """Raised when a locale pattern file is missing or malformed."""

    def __init__(
        self,
        message: str,
        path: Path | str,
        code: ErrorCode = ErrorCode.LOCALE_FILE_INVALID,
        hint: str | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=code,
            details={"path": str(path)},
            hint=hint,
        )
        self.path = path
