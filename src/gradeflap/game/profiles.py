"""Tuning profiles for the game core.

A profile freezes every constant the core needs so the loop, spawner and
collision detector never reach into global settings. The two shipped
profiles differ only in pickups: ``graded`` spawns A-F letter grades with
signed values, ``simple`` spawns a single always-positive coin.
"""

from dataclasses import dataclass, replace

from gradeflap.config.settings import Settings


@dataclass(frozen=True)
class GameProfile:
    """Immutable tuning values for one game configuration."""

    name: str = "graded"
    graded_pickups: bool = True
    simple_pickup_value: int = 1

    # View
    view_width: int = 480
    view_height: int = 640

    # Physics (per tick)
    gravity: float = 0.45
    flap_strength: float = 8.0
    max_fall: float = 12.0
    player_x: float = 80.0
    player_width: int = 48
    player_height: int = 36

    # Spawning
    spawn_interval: int = 100
    scroll_speed: float = 2.6
    obstacle_width: int = 60
    gap_min: int = 130
    gap_max: int = 180
    easy_gap_min: int = 180
    easy_gap_max: int = 220
    difficulty_score: int = 40
    min_overlap: int = 28
    top_margin: int = 40
    bottom_margin: int = 80
    ground_height: int = 60

    # Pickups
    pickup_radius: float = 20.0
    pickup_reach: float = 10.0
    offscreen_cutoff: float = -50.0

    @property
    def band_top(self) -> int:
        """Smallest legal gap top."""
        return self.top_margin

    @property
    def band_bottom(self) -> int:
        """Largest legal gap bottom."""
        return self.view_height - self.bottom_margin

    @property
    def ground_y(self) -> int:
        return self.view_height - self.ground_height

    @classmethod
    def graded(cls) -> "GameProfile":
        return cls()

    @classmethod
    def simple(cls) -> "GameProfile":
        return cls(name="simple", graded_pickups=False)

    @classmethod
    def from_settings(cls, settings: Settings) -> "GameProfile":
        """Build a profile from application settings."""
        base = cls.graded() if settings.is_graded else cls.simple()
        physics = settings.physics
        spawn = settings.spawn
        return replace(
            base,
            view_width=settings.display.view_width,
            view_height=settings.display.view_height,
            gravity=physics.gravity,
            flap_strength=physics.flap_strength,
            max_fall=physics.max_fall,
            player_x=physics.player_x,
            player_width=physics.player_width,
            player_height=physics.player_height,
            spawn_interval=spawn.spawn_interval,
            scroll_speed=spawn.scroll_speed,
            obstacle_width=spawn.obstacle_width,
            gap_min=spawn.gap_min,
            gap_max=spawn.gap_max,
            easy_gap_min=spawn.easy_gap_min,
            easy_gap_max=spawn.easy_gap_max,
            difficulty_score=spawn.difficulty_score,
            min_overlap=spawn.min_overlap,
            top_margin=spawn.top_margin,
            bottom_margin=spawn.bottom_margin,
            ground_height=spawn.ground_height,
            pickup_radius=spawn.pickup_radius,
            pickup_reach=spawn.pickup_reach,
            offscreen_cutoff=spawn.offscreen_cutoff,
        )
