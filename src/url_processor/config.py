"""
Configuration management for the URL processor.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ProcessorConfig(BaseSettings):
    """Configuration for URL processing rules."""

    canonical_host: str = Field(
        default="www.byfood.com",
        description="Host substituted into every URL by the redirection operation",
    )

    model_config = SettingsConfigDict(env_prefix="PROCESSOR_")


class ServerConfig(BaseSettings):
    """Configuration for the HTTP API."""

    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8080, description="Bind port")
    api_prefix: str = Field(default="/api", description="Prefix for API routes")

    title: str = Field(default="URL Processor API", description="Service title")
    version: str = Field(default="0.1.0", description="Service version")

    max_batch_size: int = Field(
        default=1000, description="Maximum number of URLs accepted per batch request"
    )

    model_config = SettingsConfigDict(env_prefix="SERVER_")


class BatchConfig(BaseSettings):
    """Configuration for file-based batch processing."""

    url_column: str = Field(default="url", description="Column holding input URLs")
    default_operation: str = Field(
        default="all", description="Operation applied when none is given"
    )

    model_config = SettingsConfigDict(env_prefix="BATCH_")


class Config(BaseSettings):
    """Main configuration."""

    # Sub-configs
    processor: ProcessorConfig = Field(default_factory=ProcessorConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    batch: BatchConfig = Field(default_factory=BatchConfig)

    # Global settings
    log_level: str = Field(default="INFO", description="Logging level")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_nested_delimiter="__"
    )


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (mainly for testing)."""
    global _config
    _config = None
