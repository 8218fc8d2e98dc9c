"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
"""

from pathlib import Path
from typing import List
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator, ConfigDict

# Project root: pace-band/
PROJECT_ROOT = Path(__file__).parent.parent.parent


class Settings(BaseSettings):
    """Application settings with validation."""

    # === Core ===
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")

    # === CORS ===
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://localhost:3000"],
        description="Allowed CORS origins"
    )

    # === Print layout (millimetres) ===
    band_width_mm: float = Field(
        default=60.0, gt=0,
        description="Printed width of the band, about a wrist band"
    )
    page_width_mm: float = Field(default=210.0, gt=0, description="A4 width")
    page_height_mm: float = Field(default=297.0, gt=0, description="A4 height")
    top_margin_mm: float = Field(default=10.0, ge=0)

    # === Capture ===
    export_scale: float = Field(
        default=2.0,
        description="Oversampling factor for the raster capture"
    )
    export_background: str = Field(default="#ffffff")

    # === Band ===
    default_theme: str = Field(default="classic")

    @field_validator('export_scale')
    @classmethod
    def check_export_scale(cls, v: float) -> float:
        """Anything below 2x prints visibly soft."""
        if v < 2.0:
            raise ValueError("export_scale must be at least 2")
        return v

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from comma-separated string."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(',')]
        return v

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
