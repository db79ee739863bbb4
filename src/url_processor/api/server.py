"""
FastAPI server for URL processing.

Routes:
- POST {prefix}/url/process        process a single URL
- POST {prefix}/url/process/batch  process a list of URLs
- GET  /health                     service health
- GET  /                           health check
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import APIRouter, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from url_processor.api.models import (
    BatchURLItem,
    BatchURLRequest,
    BatchURLResponse,
    ErrorResponse,
    HealthResponse,
    URLRequest,
    URLResponse,
)
from url_processor.batch import BatchProcessor
from url_processor.config import Config, get_config
from url_processor.errors import URLProcessingError
from url_processor.processing import URLProcessor

# Configure logging
logging.basicConfig(
    level=get_config().log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

router = APIRouter(tags=["url"])


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for the FastAPI app.

    Builds the processor on startup.
    """
    config: Config = app.state.config
    logger.info(
        "Starting up: canonical host=%s, api prefix=%s",
        config.processor.canonical_host,
        config.server.api_prefix,
    )
    app.state.processor = URLProcessor(canonical_host=config.processor.canonical_host)

    yield

    logger.info("Shutting down...")


def _get_processor(request: Request) -> URLProcessor:
    """Processor bound to the app, created lazily if lifespan did not run."""
    processor = getattr(request.app.state, "processor", None)
    if processor is None:
        config: Config = request.app.state.config
        processor = URLProcessor(canonical_host=config.processor.canonical_host)
        request.app.state.processor = processor
    return processor


@router.post(
    "/url/process",
    response_model=URLResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def process_url(payload: URLRequest, request: Request) -> URLResponse:
    """
    Process a URL according to the requested operation.

    Raises:
        400: If the URL or operation is missing or invalid
    """
    try:
        return _get_processor(request).process_request(payload)
    except URLProcessingError as e:
        logger.warning(f"URL processing failed: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error in process_url: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post(
    "/url/process/batch",
    response_model=BatchURLResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def process_url_batch(
    payload: BatchURLRequest, request: Request
) -> BatchURLResponse:
    """
    Process a list of URLs with one operation.

    Individual URL failures are reported per item; only an invalid
    operation or an oversized batch fails the whole request.

    Raises:
        400: If the operation is invalid or the batch is too large
    """
    max_batch_size = request.app.state.config.server.max_batch_size
    if len(payload.urls) > max_batch_size:
        raise HTTPException(
            status_code=400,
            detail=f"batch size {len(payload.urls)} exceeds limit of {max_batch_size}",
        )

    try:
        batch = BatchProcessor(_get_processor(request))
        df = batch.process_urls(payload.urls, payload.operation)
    except URLProcessingError as e:
        logger.warning(f"Batch processing failed: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Error in process_url_batch: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error")

    results = [BatchURLItem(**row) for row in df.iter_rows(named=True)]
    stats = batch.get_stats()
    return BatchURLResponse(
        operation=payload.operation,
        results=results,
        succeeded=stats["rows_succeeded"],
        failed=stats["rows_failed"],
    )


def create_app(config: Optional[Config] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        config: Configuration to use (global config if None)

    Returns:
        Configured FastAPI app
    """
    config = config or get_config()

    app = FastAPI(
        title=config.server.title,
        description="URL canonicalization and redirection API",
        version=config.server.version,
        lifespan=lifespan,
    )
    app.state.config = config
    app.include_router(router, prefix=config.server.api_prefix)

    @app.get("/")
    async def root():
        """Health check endpoint."""
        return {"status": "ok", "message": "URL Processor API is running"}

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        """Service health with name and version."""
        return HealthResponse(
            status="ok", service=config.server.title, version=config.server.version
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request, exc):
        """Render HTTP errors as {"error": message}."""
        return JSONResponse(
            status_code=exc.status_code, content={"error": str(exc.detail)}
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request, exc):
        """Render malformed request bodies as 400 {"error": message}."""
        messages = []
        for error in exc.errors():
            location = ".".join(
                str(part) for part in error.get("loc", ()) if part != "body"
            )
            messages.append(f"{location}: {error['msg']}" if location else error["msg"])
        return JSONResponse(
            status_code=400,
            content={"error": "; ".join(messages) or "invalid request payload"},
        )

    @app.exception_handler(500)
    async def internal_error_handler(request, exc):
        """Custom 500 handler."""
        logger.error(f"Unhandled error: {exc}", exc_info=exc)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    return app


# Create FastAPI app
app = create_app()


def main():
    """Run the server (for development)."""
    import uvicorn

    config = get_config()
    uvicorn.run(
        app,
        host=config.server.host,
        port=config.server.port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
