"""
Batch URL processing.

Runs a Polars DataFrame of URLs through the URL processor, recording a
result or an error per row instead of aborting on the first bad URL.
"""

import logging
from typing import Iterable, Optional

import polars as pl

from url_processor.errors import InvalidInputError, URLProcessingError
from url_processor.processing import Operation, URLProcessor, get_processor

logger = logging.getLogger(__name__)


class BatchProcessor:
    """
    Process URL columns in bulk.

    Output schema: the input columns plus
        - processed_url: Utf8 (null when the row failed)
        - error: Utf8 (null when the row succeeded)
    """

    def __init__(self, processor: Optional[URLProcessor] = None):
        """
        Initialize batch processor.

        Args:
            processor: URL processor instance (uses the global one if None)
        """
        self.processor = processor or get_processor()
        self._rows_processed = 0
        self._rows_succeeded = 0
        self._errors_by_kind: dict[str, int] = {}

    def process_batch(
        self, df: pl.DataFrame, operation: str, url_column: str = "url"
    ) -> pl.DataFrame:
        """
        Process every URL in a DataFrame column.

        Args:
            df: Input DataFrame
            operation: Operation applied to every row
            url_column: Name of the column holding URLs

        Returns:
            DataFrame with 'processed_url' and 'error' columns appended

        Raises:
            InvalidInputError: If operation is empty
            InvalidOperationError: If operation is not recognized
            ValueError: If url_column is missing from df
        """
        if not operation:
            raise InvalidInputError("operation is required")
        op = Operation.parse(operation)

        if url_column not in df.columns:
            raise ValueError(
                f"Column '{url_column}' not found in input (got {df.columns})"
            )

        processed: list[Optional[str]] = []
        errors: list[Optional[str]] = []

        for raw_url in df.get_column(url_column).cast(pl.Utf8).to_list():
            try:
                processed.append(self.processor.process(raw_url or "", op.value))
                errors.append(None)
                self._rows_succeeded += 1
            except URLProcessingError as e:
                processed.append(None)
                errors.append(e.message)
                self._errors_by_kind[e.kind] = self._errors_by_kind.get(e.kind, 0) + 1
            self._rows_processed += 1

        failed = sum(1 for error in errors if error is not None)
        logger.info(
            "Processed batch of %d URLs with '%s' (%d failed)",
            len(df),
            op.value,
            failed,
        )

        return df.with_columns(
            [
                pl.Series("processed_url", processed, dtype=pl.Utf8),
                pl.Series("error", errors, dtype=pl.Utf8),
            ]
        )

    def process_urls(self, urls: Iterable[str], operation: str) -> pl.DataFrame:
        """Process a plain sequence of URLs (column name 'url')."""
        df = pl.DataFrame({"url": list(urls)}, schema={"url": pl.Utf8})
        return self.process_batch(df, operation)

    def get_stats(self) -> dict:
        """
        Get processing statistics accumulated across batches.

        Returns:
            Dictionary with row totals and failure counts per error kind
        """
        return {
            "rows_processed": self._rows_processed,
            "rows_succeeded": self._rows_succeeded,
            "rows_failed": self._rows_processed - self._rows_succeeded,
            "errors_by_kind": dict(self._errors_by_kind),
        }
