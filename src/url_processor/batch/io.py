"""
Reading URL lists and writing batch results.

Format is chosen from the file extension:
- .csv
- .parquet
- .jsonl / .ndjson
- anything else: plain text, one URL per line ('#' comments allowed)
"""

import logging
from pathlib import Path

import polars as pl

logger = logging.getLogger(__name__)

_JSON_LINES = {".jsonl", ".ndjson"}


def read_urls(path: Path, url_column: str = "url") -> pl.DataFrame:
    """
    Load a URL list into a DataFrame.

    Args:
        path: Input file
        url_column: Column name for plain-text input (tabular input keeps its own)

    Returns:
        DataFrame containing at least the URL column

    Raises:
        FileNotFoundError: If path does not exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"URL list file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".csv":
        # Read everything as strings so URLs are never type-inferred
        df = pl.read_csv(path, infer_schema_length=0)
    elif suffix == ".parquet":
        df = pl.read_parquet(path)
    elif suffix in _JSON_LINES:
        df = pl.read_ndjson(path)
    else:
        urls = []
        for raw_line in path.read_text(encoding="utf-8").splitlines():
            entry = raw_line.strip()
            if not entry or entry.startswith("#"):
                continue
            urls.append(entry)
        df = pl.DataFrame({url_column: urls}, schema={url_column: pl.Utf8})

    logger.info("Loaded %d rows from %s", len(df), path)
    return df


def write_results(df: pl.DataFrame, path: Path) -> Path:
    """
    Write batch results.

    Plain-text output holds one processed URL per input row, with an empty
    line for rows that failed.

    Args:
        df: Result DataFrame from BatchProcessor
        path: Output file (parent directories are created)

    Returns:
        The path written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    suffix = path.suffix.lower()
    if suffix == ".csv":
        df.write_csv(path)
    elif suffix == ".parquet":
        df.write_parquet(path, compression="zstd")
    elif suffix in _JSON_LINES:
        df.write_ndjson(path)
    else:
        lines = [url or "" for url in df.get_column("processed_url").to_list()]
        path.write_text("\n".join(lines) + "\n" if lines else "", encoding="utf-8")

    logger.info("Wrote %d rows to %s", len(df), path)
    return path
