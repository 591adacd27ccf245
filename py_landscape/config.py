"""Configuration management."""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

IMAGE_FORMATS = {"PNG": "image/png", "JPEG": "image/jpeg", "TIFF": "image/tiff"}


class Settings(BaseSettings):
    """Application settings pulled from ``LANDSCAPE_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LANDSCAPE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Generation
    seed: Optional[int] = Field(default=None, description="Random seed for reproducible landscapes")
    max_iterations: int = Field(default=10, ge=0, description="Maximum generator iterations")
    max_points: int = Field(default=1_000_000, ge=4, description="Maximum height field points per request")
    max_pixels: int = Field(default=16_000_000, ge=1, description="Maximum rendered image pixels per request")

    # Output
    image_format: str = Field(default="PNG", description="Encoded image format: PNG, JPEG or TIFF")

    # API
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: str = Field(default="json", description="Logging format: json or console")

    @field_validator("image_format")
    @classmethod
    def _check_image_format(cls, value: str) -> str:
        fmt = value.upper()
        if fmt not in IMAGE_FORMATS:
            raise ValueError(f"Invalid image format {value}")
        return fmt

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        fmt = value.lower()
        if fmt not in ("json", "console"):
            raise ValueError(f"Invalid log format {value}")
        return fmt

    @property
    def media_type(self) -> str:
        return IMAGE_FORMATS[self.image_format]


settings = Settings()
