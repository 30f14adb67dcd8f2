"""World entities and the read-only snapshot handed to the renderer."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class Grade(Enum):
    """Letter grades carried by pickups, in draw order."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"

    @property
    def favorable(self) -> bool:
        return self in (Grade.A, Grade.B, Grade.C)


GRADE_VALUES = {
    Grade.A: 5,
    Grade.B: 3,
    Grade.C: 1,
    Grade.D: -2,
    Grade.E: -3,
    Grade.F: -5,
}


@dataclass
class Player:
    """The bull. ``(x, y)`` is the centre of its bounding box."""

    x: float
    y: float
    vy: float = 0.0
    width: int = 48
    height: int = 36

    @property
    def top(self) -> float:
        return self.y - self.height / 2

    @property
    def bottom(self) -> float:
        return self.y + self.height / 2

    @property
    def left(self) -> float:
        return self.x - self.width / 2

    @property
    def right(self) -> float:
        return self.x + self.width / 2


@dataclass
class Obstacle:
    """A wall with one passable gap band ``[gap_top, gap_top + gap_height]``."""

    x: float
    gap_top: int
    gap_height: int
    width: int = 60
    passed: bool = False

    @property
    def gap_bottom(self) -> int:
        return self.gap_top + self.gap_height

    @property
    def right(self) -> float:
        return self.x + self.width

    def overlap_with(self, other: "Obstacle") -> int:
        """Vertical overlap between this gap band and another one."""
        return min(self.gap_bottom, other.gap_bottom) - max(self.gap_top, other.gap_top)


@dataclass
class Pickup:
    """A collectible worth ``value`` coins. ``grade`` is None for plain coins."""

    x: float
    y: float
    value: int
    grade: Optional[Grade] = None
    radius: float = 20.0
    collected: bool = False

    @property
    def label(self) -> str:
        return self.grade.value if self.grade else "$"


@dataclass
class GameState:
    """Everything a run mutates, owned by the game loop."""

    player: Player
    obstacles: List[Obstacle] = field(default_factory=list)
    pickups: List[Pickup] = field(default_factory=list)
    frame: int = 0


# Snapshot types: immutable copies for the presentation layer

@dataclass(frozen=True)
class PlayerView:
    x: float
    y: float
    width: int
    height: int
    tilt: float
    skin: str


@dataclass(frozen=True)
class ObstacleView:
    x: float
    gap_top: int
    gap_height: int
    width: int


@dataclass(frozen=True)
class PickupView:
    x: float
    y: float
    radius: float
    label: str
    value: int


@dataclass(frozen=True)
class WorldSnapshot:
    """Read-only view of one frame."""

    view_size: Tuple[int, int]
    ground_y: int
    player: PlayerView
    obstacles: Tuple[ObstacleView, ...]
    pickups: Tuple[PickupView, ...]
    score: int
    high_score: int
    coins: int
    running: bool
    message: str = ""
