"""Player collision tests against the world."""

import math
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from gradeflap.game.entities import Obstacle, Pickup, Player
from gradeflap.game.profiles import GameProfile


@dataclass
class CollisionReport:
    """What one collision pass found.

    ``passed`` and ``collected`` only list entities whose monotonic flag
    was flipped during this pass.
    """

    crashed: bool = False
    cause: Optional[str] = None
    passed: List[Obstacle] = field(default_factory=list)
    collected: List[Pickup] = field(default_factory=list)

    @property
    def points(self) -> int:
        return len(self.passed)

    def crash(self, cause: str) -> None:
        if not self.crashed:
            self.crashed = True
            self.cause = cause


def overlaps_horizontally(player: Player, obstacle: Obstacle) -> bool:
    return player.right > obstacle.x and player.left < obstacle.right


def inside_gap(player: Player, obstacle: Obstacle) -> bool:
    """True when the player's vertical extent fits in the gap band."""
    return player.top >= obstacle.gap_top and player.bottom <= obstacle.gap_bottom


def hits_obstacle(player: Player, obstacle: Obstacle) -> bool:
    return overlaps_horizontally(player, obstacle) and not inside_gap(player, obstacle)


class CollisionDetector:
    """Runs every collision test for one tick.

    Obstacles are marked passed and pickups marked collected here, so
    repeated checks against the same entity report it at most once.
    """

    def __init__(self, profile: GameProfile):
        self.profile = profile

    def out_of_bounds(self, player: Player) -> Optional[str]:
        if player.bottom >= self.profile.ground_y:
            return "ground"
        if player.top <= 0:
            return "ceiling"
        return None

    def touches(self, player: Player, pickup: Pickup) -> bool:
        distance = math.hypot(player.x - pickup.x, player.y - pickup.y)
        return distance < pickup.radius + self.profile.pickup_reach

    def check(
        self,
        player: Player,
        obstacles: Iterable[Obstacle],
        pickups: Iterable[Pickup],
    ) -> CollisionReport:
        report = CollisionReport()

        boundary = self.out_of_bounds(player)
        if boundary:
            report.crash(boundary)

        for obstacle in obstacles:
            if hits_obstacle(player, obstacle):
                report.crash("obstacle")

            # Scored once, when the trailing edge clears the player's leading edge
            if not obstacle.passed and obstacle.right < player.left:
                obstacle.passed = True
                report.passed.append(obstacle)

        for pickup in pickups:
            if pickup.collected:
                continue
            if self.touches(player, pickup):
                pickup.collected = True
                report.collected.append(pickup)

        return report
