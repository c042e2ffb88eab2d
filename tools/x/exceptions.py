"""Exceptions for the X tools.

``XToolError`` subclasses are already shaped for the tool caller and carry
the MCP error code they map to. ``XApiError`` is a raw remote failure.
"""

from mcp.types import INVALID_REQUEST, METHOD_NOT_FOUND


class XToolError(Exception):
    """Base exception for errors reported back to the tool caller."""

    code: int = INVALID_REQUEST


class InvalidToolArguments(XToolError):
    """Tool arguments failed validation."""


class UnknownToolError(XToolError):
    """No tool is registered under the requested name."""

    code = METHOD_NOT_FOUND


class MediaValidationError(XToolError):
    """Local media file does not satisfy upload requirements."""


class MediaNotFoundError(MediaValidationError):
    """Media path does not exist or is not a regular file."""


class MediaTooLargeError(MediaValidationError):
    """Media file exceeds the size ceiling for its class."""


class UnsupportedMediaFormatError(MediaValidationError):
    """Media file extension is not in the supported table."""


class MediaUploadError(XToolError):
    """Remote media upload failed."""


class RateLimitError(XToolError):
    """Endpoint group is rate limited."""

    def __init__(self, group: str, retry_minutes: int) -> None:
        super().__init__(
            f"Rate limit exceeded for {group}. "
            f"Please try again in {retry_minutes} minutes."
        )
        self.group = group
        self.retry_minutes = retry_minutes


class XApiError(Exception):
    """X API returned an error response."""

    def __init__(self, message: str, *, code: int | None = None) -> None:
        super().__init__(message)
        self.code = code
