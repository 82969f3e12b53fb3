"""Application configuration."""
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings from env."""

    search_api_url: str = "http://localhost:5000/api/search"
    request_timeout_seconds: float = Field(default=10.0, gt=0)

    page_size: int = Field(default=10, ge=1)  # items materialized per intersection
    intersection_threshold: float = Field(default=0.1, gt=0, le=1)

    log_level: Optional[str] = None  # falls back to LOG_LEVEL, then INFO

    class Config:
        env_file = ".env"
        env_prefix = "ALGOSEARCH_"
        extra = "ignore"
