"""
Configuration for Image Normalize Flow.

Settings are read from environment variables (prefix INF_, nested sections
separated by "__") and an optional .env file, e.g.:

    INF_SYSTEM__LOG_LEVEL=DEBUG
    INF_IMAGE__TAIL_WINDOW_SIZE=4096
    INF_IMAGE__DEFAULT_INTERPOLATION=area
"""

from functools import lru_cache
from typing import Any, Dict, List

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.constants import APIConstants, ImageConstants, StreamConstants, SystemConstants
from core.enums import EdgePolicy, InterpolationMode
from core.utils.enum_converter import parse_enum


class SystemSettings(BaseModel):
    """Logging and debug settings"""

    log_level: str = SystemConstants.LOG_LEVEL_DEFAULT
    debug: bool = False

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {v}")
        return level


class APISettings(BaseModel):
    """HTTP server settings"""

    host: str = "0.0.0.0"
    port: int = Field(default=8000, ge=1, le=65535)
    cors_enabled: bool = True
    cors_origins: List[str] = ["*"]


class ImageSettings(BaseModel):
    """Sniffing and resampling settings"""

    tail_window_size: int = Field(
        default=StreamConstants.DEFAULT_WINDOW_SIZE,
        ge=StreamConstants.MIN_WINDOW_SIZE,
        le=StreamConstants.MAX_WINDOW_SIZE,
    )
    default_canvas_width: int = Field(
        default=ImageConstants.DEFAULT_CANVAS_WIDTH,
        ge=ImageConstants.MIN_CANVAS_DIMENSION,
        le=ImageConstants.MAX_CANVAS_DIMENSION,
    )
    default_canvas_height: int = Field(
        default=ImageConstants.DEFAULT_CANVAS_HEIGHT,
        ge=ImageConstants.MIN_CANVAS_DIMENSION,
        le=ImageConstants.MAX_CANVAS_DIMENSION,
    )
    max_upload_mb: float = Field(default=APIConstants.MAX_UPLOAD_SIZE_MB, gt=0)
    default_edge_policy: EdgePolicy = EdgePolicy.REFLECT
    default_interpolation: InterpolationMode = InterpolationMode.BICUBIC

    @field_validator("default_edge_policy", mode="before")
    @classmethod
    def validate_edge_policy(cls, v):
        policy = parse_enum(v, EdgePolicy, None)
        if policy is None:
            raise ValueError(f"Invalid edge policy: {v}")
        return policy

    @field_validator("default_interpolation", mode="before")
    @classmethod
    def validate_interpolation(cls, v):
        mode = parse_enum(v, InterpolationMode, None)
        if mode is None:
            raise ValueError(f"Invalid interpolation mode: {v}")
        return mode


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_prefix="INF_",
        env_nested_delimiter="__",
        env_file=".env",
        extra="ignore",
    )

    environment: str = "development"
    system: SystemSettings = SystemSettings()
    api: APISettings = APISettings()
    image: ImageSettings = ImageSettings()

    def to_dict(self) -> Dict[str, Any]:
        """Export settings as a plain dict (for app.state.config)."""
        return self.model_dump(mode="json")


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
