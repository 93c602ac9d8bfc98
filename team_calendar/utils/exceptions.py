"""Custom exceptions for the team calendar client."""

from typing import Any, Dict, Optional


class CalendarError(Exception):
    """Base class for every error raised by the calendar package."""


class InvalidDate(CalendarError, ValueError):
    """Raised when a Jalali or Gregorian date is malformed or out of range.

    Attributes:
        value: The offending input, kept for user-facing messages
    """

    def __init__(self, message: str, value: Any = None) -> None:
        """Initialize the exception.

        Args:
            message: Human readable description of the problem
            value: The rejected input
        """
        self.value = value
        super().__init__(message)


class FetchFailure(CalendarError):
    """Raised when a call to the remote team API fails.

    Attributes:
        message: The error message or response body
        status_code: HTTP status code, ``None`` for transport errors
        headers: Optional response headers
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: The error message
            status_code: HTTP status code
            headers: Optional HTTP headers
        """
        self.message = message
        self.status_code = status_code
        self.headers = headers
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"HTTP {self.status_code}: {self.message}"

    def to_json(self) -> Dict[str, Any]:
        """Serialisable view of the failure, used in non-blocking messages.

        Returns:
            Dictionary with status code and message
        """
        return {"status_code": self.status_code, "message": self.message}
