"""Configuration management."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: str = Field(default="json", description="Logging format (json or console)")

    # API
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")

    # Generation
    default_seed: Optional[int] = Field(
        default=None, description="Seed for the shared generator, random when unset"
    )
    default_string_length: int = Field(
        default=32, ge=0, description="Length of random seed strings"
    )
    default_rounding: str = Field(default="truncate", description="Rounding policy for integer draws")
    default_algorithm: str = Field(default="mulberry32", description="State stepping algorithm")
    max_stream_count: int = Field(
        default=100000, ge=1, description="Maximum values returned by one stream request"
    )
    bounded_normal_max_attempts: int = Field(
        default=1000, ge=1, description="Retry cap for bounded normal rejection sampling"
    )

    class Config:
        env_file = ".env"
        env_prefix = "SEEDRAND_"


settings = Settings()
