"""
URL processing operations.

Implements the three rewrite operations:
- canonical: drop the query string, trim trailing slashes from the path
- redirection: force the canonical host, lowercase the whole URL
- all: canonical, then redirection on the re-parsed result
"""

import logging
from enum import Enum
from typing import Optional

from url_processor.config import get_config
from url_processor.errors import (
    InvalidInputError,
    InvalidOperationError,
    MalformedURLError,
)
from url_processor.models import URLRequest, URLResponse

from .parser import URLParts, parse_url

logger = logging.getLogger(__name__)


class Operation(str, Enum):
    """Processing mode selected by the caller."""

    CANONICAL = "canonical"
    REDIRECTION = "redirection"
    ALL = "all"

    @classmethod
    def parse(cls, value: str) -> "Operation":
        """
        Resolve an operation name (exact, case-sensitive match).

        Raises:
            InvalidOperationError: If the name is not recognized
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidOperationError(value) from None


class URLProcessor:
    """
    Stateless URL rewrite engine.

    Usage:
        processor = URLProcessor()
        processor.process("https://BYFOOD.com/food-EXPeriences?query=abc/", "all")
        # 'https://www.byfood.com/food-experiences'
    """

    def __init__(self, canonical_host: Optional[str] = None):
        """
        Initialize processor.

        Args:
            canonical_host: Host forced by redirection (defaults to config)
        """
        self.canonical_host = canonical_host or get_config().processor.canonical_host

    def process(self, url: str, operation: str) -> str:
        """
        Apply an operation to a URL.

        Args:
            url: Raw URL string
            operation: One of 'canonical', 'redirection', 'all'

        Returns:
            Processed URL string

        Raises:
            InvalidInputError: If url or operation is empty
            InvalidOperationError: If operation is not recognized
            MalformedURLError: If url cannot be parsed
        """
        if not url:
            raise InvalidInputError("URL is required")
        if not operation:
            raise InvalidInputError("operation is required")

        op = Operation.parse(operation)

        try:
            parts = parse_url(url)
        except MalformedURLError as e:
            logger.warning("Rejected malformed URL %r: %s", url, e.reason)
            raise

        if op is Operation.CANONICAL:
            result = self.canonicalize(parts)
        elif op is Operation.REDIRECTION:
            result = self.redirect(parts)
        else:
            result = self.apply_all(parts)

        logger.debug("Processed %r with %s -> %r", parts.raw, op.value, result)
        return result

    def process_request(self, request: URLRequest) -> URLResponse:
        """Process a request model and wrap the result in a response model."""
        processed = self.process(request.url, request.operation)
        return URLResponse(processed_url=processed)

    def canonicalize(self, parts: URLParts) -> str:
        """Remove the query string and trailing slashes; keep the fragment."""
        if parts.is_opaque:
            return parts.replace(query="").to_url()

        path = parts.path.rstrip("/") or "/"
        return parts.replace(query="", path=path).to_url()

    def redirect(self, parts: URLParts) -> str:
        """
        Replace the host with the canonical host and lowercase everything.

        The port is dropped along with the original host. Lowercasing runs on
        the serialized string, so percent escapes are lowercased as well.
        """
        return parts.replace(host=self.canonical_host, port=None).to_url().lower()

    def apply_all(self, parts: URLParts) -> str:
        """Canonicalize, re-parse, then redirect."""
        canonical_url = self.canonicalize(parts)
        return self.redirect(parse_url(canonical_url))


# Global processor instance
_processor: Optional[URLProcessor] = None


def get_processor() -> URLProcessor:
    """Get or create global processor instance."""
    global _processor
    if _processor is None:
        _processor = URLProcessor()
    return _processor


def reset_processor() -> None:
    """Reset global processor (for testing)."""
    global _processor
    _processor = None


def process_url(url: str, operation: str) -> str:
    """Process a URL with the global processor."""
    return get_processor().process(url, operation)
