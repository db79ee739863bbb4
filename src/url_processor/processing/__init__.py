"""
URL parsing and rewrite operations.
"""

from .parser import URLParts, parse_url
from .processor import (
    Operation,
    URLProcessor,
    get_processor,
    process_url,
    reset_processor,
)

__all__ = [
    "URLParts",
    "parse_url",
    "Operation",
    "URLProcessor",
    "get_processor",
    "process_url",
    "reset_processor",
]
