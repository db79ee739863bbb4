"""
Command line interface.

    url-processor process "https://BYFOOD.com/food-EXPeriences?q=abc/" --operation all
    url-processor batch --input urls.txt --output results.csv --operation canonical
    url-processor serve --port 8080
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Optional, Sequence

from url_processor.batch import BatchProcessor, read_urls, write_results
from url_processor.config import get_config
from url_processor.errors import URLProcessingError
from url_processor.processing import Operation, URLProcessor

logger = logging.getLogger(__name__)

OPERATIONS = [op.value for op in Operation]


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    config = get_config()
    parser = argparse.ArgumentParser(
        prog="url-processor",
        description="Canonicalize URLs and rewrite them onto the canonical host.",
    )
    parser.add_argument(
        "--log-level",
        default=config.log_level,
        help="Logging level (defaults to config).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    process = subparsers.add_parser("process", help="Process a single URL.")
    process.add_argument("url", help="URL to process.")
    process.add_argument(
        "--operation",
        default=config.batch.default_operation,
        help=f"Operation to apply: {', '.join(OPERATIONS)} (default: %(default)s).",
    )

    batch = subparsers.add_parser("batch", help="Process a file of URLs.")
    batch.add_argument(
        "--input",
        required=True,
        type=Path,
        help="Input file (.csv, .parquet, .jsonl, or text with one URL per line).",
    )
    batch.add_argument(
        "--output",
        required=True,
        type=Path,
        help="Output file; format follows the extension.",
    )
    batch.add_argument(
        "--operation",
        default=config.batch.default_operation,
        help=f"Operation to apply: {', '.join(OPERATIONS)} (default: %(default)s).",
    )
    batch.add_argument(
        "--url-column",
        default=config.batch.url_column,
        help="Column holding URLs in tabular input (default: %(default)s).",
    )

    serve = subparsers.add_parser("serve", help="Run the HTTP API.")
    serve.add_argument("--host", default=config.server.host, help="Bind address.")
    serve.add_argument(
        "--port", type=int, default=config.server.port, help="Bind port."
    )

    return parser.parse_args(argv)


def run_process(args: argparse.Namespace) -> int:
    """Process one URL and print the result."""
    processor = URLProcessor(canonical_host=get_config().processor.canonical_host)
    try:
        print(processor.process(args.url, args.operation))
    except URLProcessingError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


def run_batch(args: argparse.Namespace) -> int:
    """Process a URL list file and write the results."""
    start_time = time.time()
    df = read_urls(args.input, url_column=args.url_column)

    processor = URLProcessor(canonical_host=get_config().processor.canonical_host)
    batch = BatchProcessor(processor)
    try:
        result = batch.process_batch(df, args.operation, url_column=args.url_column)
    except URLProcessingError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    write_results(result, args.output)

    stats = batch.get_stats()
    logger.info(
        "Completed batch in %.2fs | rows=%s | succeeded=%s | failed=%s | errors=%s",
        time.time() - start_time,
        stats["rows_processed"],
        stats["rows_succeeded"],
        stats["rows_failed"],
        stats["errors_by_kind"],
    )
    return 0


def run_serve(args: argparse.Namespace) -> int:
    """Run the API server."""
    import uvicorn

    from url_processor.api.server import app

    logger.info("Server starting on %s:%s", args.host, args.port)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.command == "process":
        return run_process(args)
    if args.command == "batch":
        return run_batch(args)
    return run_serve(args)


if __name__ == "__main__":
    sys.exit(main())
