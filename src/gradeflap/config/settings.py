"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DisplaySettings(BaseModel):
    """Display-related settings."""

    # Base view in world pixels; game logic uses these coordinates
    view_width: int = Field(default=480, ge=200)
    view_height: int = Field(default=640, ge=400)

    # Window
    scale: float = Field(default=1.0, gt=0.0)
    fps: int = 60
    fullscreen: bool = False


class PhysicsSettings(BaseModel):
    """Player movement tuning, in pixels per tick."""

    gravity: float = 0.45
    flap_strength: float = 8.0
    max_fall: float = 12.0

    player_x: float = 80.0
    player_width: int = 48
    player_height: int = 36


class SpawnSettings(BaseModel):
    """Obstacle and pickup generation tuning."""

    spawn_interval: int = Field(default=100, ge=1)  # ticks (~1.6s at 60fps)
    scroll_speed: float = 2.6
    obstacle_width: int = 60

    # Gap size range at full difficulty and at score 0
    gap_min: int = 130
    gap_max: int = 180
    easy_gap_min: int = 180
    easy_gap_max: int = 220
    difficulty_score: int = Field(default=40, ge=1)

    min_overlap: int = 28
    top_margin: int = 40
    bottom_margin: int = 80
    ground_height: int = 60

    pickup_radius: float = 20.0
    pickup_reach: float = 10.0
    offscreen_cutoff: float = -50.0


class StorageSettings(BaseModel):
    """Persistence settings."""

    data_path: Path = Field(default_factory=lambda: Path.home() / ".gradeflap" / "save.json")


class AudioSettings(BaseModel):
    """Sound effect settings."""

    enabled: bool = True
    volume: float = Field(default=0.6, ge=0.0, le=1.0)


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="GRADEFLAP_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    debug: bool = False

    # "graded" spawns A-F grade pickups, "simple" spawns plain coins
    profile: Literal["graded", "simple"] = "graded"

    # Window
    window_title: str = "Grade Flap"
    log_file: Path = Field(default_factory=lambda: Path("gradeflap.log"))

    # Nested settings
    display: DisplaySettings = Field(default_factory=DisplaySettings)
    physics: PhysicsSettings = Field(default_factory=PhysicsSettings)
    spawn: SpawnSettings = Field(default_factory=SpawnSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    audio: AudioSettings = Field(default_factory=AudioSettings)

    @property
    def is_graded(self) -> bool:
        """Check if letter-grade pickups are enabled."""
        return self.profile == "graded"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
