"""
Bulk URL processing over Polars DataFrames and URL list files.
"""

from .io import read_urls, write_results
from .processor import BatchProcessor

__all__ = ["BatchProcessor", "read_urls", "write_results"]
