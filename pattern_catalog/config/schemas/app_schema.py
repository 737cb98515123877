"""Main application configuration schema."""

from pydantic import BaseModel, Field

from .logging_schema import LoggingConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    debug: bool = Field(False, description="Log at DEBUG level unless --log-level is given")
