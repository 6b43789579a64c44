"""
Error classes for the Capture Python SDK.

Every failure is raised as a subclass of CaptureError; nothing is retried.
"""

from typing import Any, Optional


class CaptureError(Exception):
    """Base exception class for Capture SDK."""

    def __init__(self, message: str, status_code: Optional[int] = None, response: Optional[Any] = None):
        """Initialize Capture error.

        Args:
            message: Error message
            status_code: HTTP status code (optional)
            response: Raw response body from the API (optional)
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response


class InvalidOptionFormat(CaptureError):
    """A command-line option token is not of the form key=value."""

    def __init__(self, option: str):
        """Initialize invalid option error.

        Args:
            option: The offending token
        """
        super().__init__(f"invalid option format: {option} (expected key=value)")
        self.option = option


class ValidationError(CaptureError):
    """Input validation error raised before any request is built."""

    def __init__(self, message: str):
        super().__init__(message)


class MissingCredential(ValidationError):
    """API key or secret is empty."""


class MissingTargetURL(ValidationError):
    """The target page URL is empty."""


class HTTPStatusError(CaptureError):
    """The API answered with a status code outside 2xx."""

    def __init__(self, status_code: int, body: Optional[str] = None):
        """Initialize HTTP status error.

        Args:
            status_code: HTTP status code
            body: Response text, if any
        """
        super().__init__(f"HTTP error: {status_code}", status_code, body)
        self.body = body


class TransportError(CaptureError):
    """Network-related error (connection failure, timeout, DNS failure, etc.)."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        """Initialize transport error.

        Args:
            message: Error message
            cause: Underlying exception raised by the transport
        """
        super().__init__(message)
        self.cause = cause


class DecodeError(CaptureError):
    """Response body could not be decoded."""

    def __init__(self, message: str, body: Optional[str] = None):
        super().__init__(message, response=body)
        self.body = body
