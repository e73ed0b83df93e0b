"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
Nested display values use a double underscore, for example
HOLIDAY_LIGHTS_DISPLAY__INTERVAL_MS=50.
"""

from functools import lru_cache
from pathlib import Path
from typing import List, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


class DisplaySettings(BaseSettings):
    """Panel geometry and animation timing."""

    # LED matrix
    width: int = Field(default=64, gt=0)
    height: int = Field(default=64, gt=0)

    # Animation
    interval_ms: int = Field(default=100, gt=0)
    max_frames: int = Field(default=100, gt=0)
    cycling: bool = True

    # Rendering
    scale: int = Field(default=10, ge=1)  # Preview pixels per LED
    brightness: float = Field(default=1.0, ge=0.0, le=1.0)


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="HOLIDAY_LIGHTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # Environment
    env: Literal["simulator", "headless"] = "simulator"
    backend: Literal["pillow", "pygame"] = "pillow"
    debug: bool = False

    # Paths
    assets_path: Path = Field(default_factory=lambda: PROJECT_ROOT / "assets")
    font_path: Optional[Path] = None

    # Scene names to play, in order; all built-in scenes when unset
    scenes: Optional[List[str]] = None

    # Nested settings
    display: DisplaySettings = Field(default_factory=DisplaySettings)

    @property
    def is_simulator(self) -> bool:
        """Check if running with the preview window."""
        return self.env == "simulator"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
