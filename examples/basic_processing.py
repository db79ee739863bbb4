"""
Basic processing example.

Demonstrates the three URL operations and batch processing.
"""

import polars as pl

from url_processor.batch import BatchProcessor
from url_processor.errors import URLProcessingError
from url_processor.processing import URLProcessor, parse_url


def main():
    """Run basic processing example."""
    print("=" * 60)
    print("URL Processor: Basic Example")
    print("=" * 60)

    processor = URLProcessor()

    # Example 1: Single URL through each operation
    print("\n1. Single URL Operations")
    print("-" * 60)

    raw_url = "https://BYFOOD.com/food-EXPeriences?query=abc/#section"
    print(f"Raw URL: {raw_url}")

    parts = parse_url(raw_url)
    print(f"Scheme: {parts.scheme}")
    print(f"Host: {parts.host}")
    print(f"Path: {parts.path}")
    print(f"Query: {parts.query}")
    print(f"Fragment: {parts.fragment}")

    for operation in ("canonical", "redirection", "all"):
        print(f"\n{operation:>12}: {processor.process(raw_url, operation)}")

    # Example 2: Errors
    print("\n\n2. Error Handling")
    print("-" * 60)

    failing = [("", "canonical"), (raw_url, "bogus"), ("://invalid-url", "all")]
    for url, operation in failing:
        try:
            processor.process(url, operation)
        except URLProcessingError as e:
            print(f"{url!r} / {operation!r} -> {e.kind}: {e}")

    # Example 3: Batch of URLs
    print("\n\n3. Batch Processing")
    print("-" * 60)

    df = pl.DataFrame(
        {
            "url": [
                "https://BYFOOD.com/food-EXPeriences?query=abc/",
                "https://blog.byfood.com/Tokyo/Ramen/?utm_source=x",
                "://invalid-url",
            ]
        }
    )
    batch = BatchProcessor(processor)
    result = batch.process_batch(df, "all")

    print(result)
    print(f"\nStats: {batch.get_stats()}")


if __name__ == "__main__":
    main()
