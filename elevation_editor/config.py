"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
Every value can be overridden with an ELEVATION_EDITOR_* environment variable.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Settings(BaseSettings):
    """Editor settings with validation."""

    # === Core ===
    log_level: str = Field(default="INFO", description="Logging level")

    # === History ===
    history_limit: int = Field(
        default=100, ge=1,
        description="Maximum number of undo steps kept"
    )

    # === Editing defaults ===
    smoothing_radius: int = Field(
        default=5, ge=0,
        description="Neighbours affected on each side of an edit"
    )
    smoothing_strength: float = Field(
        default=0.5, ge=0.0, le=1.0,
        description="Blend intensity of an edit (0-1)"
    )
    anomaly_threshold: float = Field(
        default=10.0, ge=1.0, le=100.0,
        description="Elevation jump (m) flagged as an anomaly"
    )

    # === Interaction ===
    drag_start_pixels: float = Field(
        default=2.0, ge=0.0,
        description="Pointer movement (px) before a press becomes a drag"
    )
    default_chart_height: float = Field(
        default=300.0, gt=0,
        description="Chart height (px) assumed when the renderer gives none"
    )

    # === Zoom animation ===
    animation_duration_ms: float = Field(default=300.0, ge=0.0)
    frame_interval_ms: float = Field(default=16.0, gt=0)

    @field_validator('log_level')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept 'debug', 'Info' etc."""
        return v.upper()

    model_config = SettingsConfigDict(
        env_prefix="ELEVATION_EDITOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
