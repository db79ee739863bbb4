"""
URL canonicalization and redirection processing.
"""

from url_processor.errors import (
    InvalidInputError,
    InvalidOperationError,
    MalformedURLError,
    URLProcessingError,
)
from url_processor.models import URLRequest, URLResponse
from url_processor.processing import Operation, URLProcessor, parse_url, process_url

__version__ = "0.1.0"

__all__ = [
    "InvalidInputError",
    "InvalidOperationError",
    "MalformedURLError",
    "URLProcessingError",
    "URLRequest",
    "URLResponse",
    "Operation",
    "URLProcessor",
    "parse_url",
    "process_url",
]
