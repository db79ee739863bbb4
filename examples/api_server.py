"""
Example: API Server

Demonstrates running the FastAPI server for URL processing.

Start the server and query it:
```bash
# Start the server
uv run python examples/api_server.py

# In another terminal, query the API:
curl -X POST http://localhost:8080/api/url/process \
  -H "Content-Type: application/json" \
  -d '{"url": "https://BYFOOD.com/food-EXPeriences?query=abc/", "operation": "all"}'
```
"""

import logging

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


def main():
    """Run the API server."""
    import uvicorn

    from url_processor.api.server import app
    from url_processor.config import get_config

    config = get_config()
    prefix = config.server.api_prefix
    base = f"http://localhost:{config.server.port}"

    print("=" * 80)
    print("Starting URL Processor API Server")
    print("=" * 80)
    print()
    print(f"The server will start on http://{config.server.host}:{config.server.port}")
    print()
    print("API Endpoints:")
    print(f"  POST {prefix}/url/process          - Process a single URL")
    print(f"  POST {prefix}/url/process/batch    - Process a list of URLs")
    print("  GET  /health                       - Service health")
    print()
    print("Example queries:")
    print(f"  curl {base}/health")
    print(
        f"  curl -X POST {base}{prefix}/url/process "
        "-H 'Content-Type: application/json' "
        """-d '{"url": "https://BYFOOD.com/a?b=1", "operation": "canonical"}'"""
    )
    print()
    print("=" * 80)
    print()

    # Run server
    uvicorn.run(app, host=config.server.host, port=config.server.port, log_level="info")


if __name__ == "__main__":
    main()
