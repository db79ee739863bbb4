"""
API request and response models.

URLRequest/URLResponse are shared with the processor; the rest are
HTTP-only payloads.
"""

from pydantic import BaseModel, Field

from url_processor.models import URLRequest, URLResponse


class ErrorResponse(BaseModel):
    """Standard error payload."""

    error: str = Field(..., description="Error message")


class HealthResponse(BaseModel):
    """Response for GET /health."""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")


class BatchURLRequest(BaseModel):
    """Request for POST /url/process/batch."""

    urls: list[str] = Field(default_factory=list, description="URLs to process")
    operation: str = Field("", description="Operation applied to every URL")


class BatchURLItem(BaseModel):
    """Result for a single URL in a batch."""

    url: str = Field(..., description="Input URL")
    processed_url: str | None = Field(
        None, description="Processed URL (null on failure)"
    )
    error: str | None = Field(None, description="Error message (null on success)")


class BatchURLResponse(BaseModel):
    """Response for POST /url/process/batch."""

    operation: str = Field(..., description="Operation applied")
    results: list[BatchURLItem] = Field(
        default_factory=list, description="Per-URL results in input order"
    )
    succeeded: int = Field(0, description="Number of URLs processed successfully")
    failed: int = Field(0, description="Number of URLs that failed")


__all__ = [
    "URLRequest",
    "URLResponse",
    "ErrorResponse",
    "HealthResponse",
    "BatchURLRequest",
    "BatchURLItem",
    "BatchURLResponse",
]
