"""
Error types raised by URL processing.

All errors derive from ValueError so existing ``except ValueError`` callers
keep working.
"""

from typing import Optional


class URLProcessingError(ValueError):
    """Base class for URL processing failures."""

    kind = "processing_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(URLProcessingError):
    """Raised when the URL or the operation is missing."""

    kind = "invalid_input"


class InvalidOperationError(URLProcessingError):
    """Raised when the operation is not one of the recognized values."""

    kind = "invalid_operation"

    def __init__(self, operation: str):
        super().__init__("invalid operation type")
        self.operation = operation


class MalformedURLError(URLProcessingError):
    """
    Raised when a URL cannot be decomposed into valid components.

    The public message is fixed; ``reason`` carries the parser detail.
    """

    kind = "malformed_url"

    def __init__(self, url: str, reason: Optional[str] = None):
        super().__init__("invalid URL format")
        self.url = url
        self.reason = reason
