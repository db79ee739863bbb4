"""
API serving layer.

Handles URL processing requests over HTTP.
"""

from url_processor.api.models import (
    BatchURLItem,
    BatchURLRequest,
    BatchURLResponse,
    ErrorResponse,
    HealthResponse,
    URLRequest,
    URLResponse,
)
from url_processor.api.server import app, create_app

__all__ = [
    "BatchURLItem",
    "BatchURLRequest",
    "BatchURLResponse",
    "ErrorResponse",
    "HealthResponse",
    "URLRequest",
    "URLResponse",
    "app",
    "create_app",
]
