"""
Request and response models for URL processing.
"""

from pydantic import BaseModel, Field


class URLRequest(BaseModel):
    """Input for URL processing."""

    url: str = Field("", description="URL to process")
    operation: str = Field(
        "", description="Operation to apply: 'canonical', 'redirection' or 'all'"
    )


class URLResponse(BaseModel):
    """Output of URL processing."""

    processed_url: str = Field(..., description="Processed URL")
