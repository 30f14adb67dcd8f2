"""Obstacle and pickup generation.

Each spawn produces one obstacle and one pickup. Gap bands always stay
inside the legal vertical band and overlap the previous obstacle's band
by at least ``min_overlap`` pixels, so there is always a way through.
"""

import logging
import math
import random
from typing import List, Optional, Tuple

from gradeflap.game.entities import GRADE_VALUES, Obstacle, Pickup
from gradeflap.game.picker import pick_grade
from gradeflap.game.profiles import GameProfile

logger = logging.getLogger(__name__)

SPAWN_OFFSET_X = 10        # new obstacles start just past the right edge
FALLBACK_JITTER = 10       # +/- px around the previous gap centre
GOOD_PICKUP_JITTER = 20    # +/- px around the gap centre line
BAD_PICKUP_OFFSET = 80     # min px beside the obstacle
BAD_PICKUP_SPREAD = 40


class ObstacleSpawner:
    """Creates obstacle/pickup pairs for the game loop.

    ``previous_gap`` holds the ``(gap_top, gap_height)`` of the last
    obstacle spawned in the current run, or None before the first one.
    """

    def __init__(self, profile: GameProfile, rng: Optional[random.Random] = None):
        self.profile = profile
        self.rng = rng or random.Random()
        self.previous_gap: Optional[Tuple[int, int]] = None

    def reset(self) -> None:
        """Forget the previous gap; the next spawn is a run's first."""
        self.previous_gap = None

    def gap_range(self, score: int) -> Tuple[int, int]:
        """Half-open gap height range, narrowing linearly with score."""
        p = self.profile
        difficulty = min(1.0, max(0, score) / p.difficulty_score)
        ease = 1 - difficulty
        low = math.floor(p.gap_min + (p.easy_gap_min - p.gap_min) * ease)
        high = math.floor(p.gap_max + (p.easy_gap_max - p.gap_max) * ease)
        return low, max(low, high)

    def draw_gap_height(self, score: int) -> int:
        low, high = self.gap_range(score)
        if high <= low:
            return low
        return self.rng.randrange(low, high)

    def place_gap(self, gap: int) -> int:
        """Choose ``gap_top`` for a new gap of the given height."""
        p = self.profile
        lowest = p.band_top
        highest = p.band_bottom - gap

        if self.previous_gap is None:
            span = highest - lowest
            return lowest + (self.rng.randrange(span) if span > 0 else 0)

        prev_top, prev_gap = self.previous_gap
        min_y = max(lowest, math.ceil(prev_top + p.min_overlap - gap))
        max_y = min(highest, math.floor(prev_top + prev_gap - p.min_overlap))
        if min_y <= max_y:
            return self.rng.randint(min_y, max_y)

        # Degenerate case: hug the previous centre as closely as the band allows
        center = math.floor(prev_top + (prev_gap - gap) / 2)
        jitter = self.rng.randint(-FALLBACK_JITTER, FALLBACK_JITTER)
        logger.debug(f"No overlap range for gap {gap} after {self.previous_gap}, centring")
        return max(lowest, min(highest, center + jitter))

    def spawn(
        self,
        score: int,
        obstacles: List[Obstacle],
        pickups: List[Pickup],
    ) -> Tuple[Obstacle, Pickup]:
        """Append one new obstacle and its pickup.

        Args:
            score: Current run score, drives difficulty and grade odds
            obstacles: Obstacle sequence to append to
            pickups: Pickup sequence to append to

        Returns:
            The created (obstacle, pickup) pair
        """
        p = self.profile
        gap = self.draw_gap_height(score)
        gap_top = self.place_gap(gap)

        obstacle = Obstacle(
            x=p.view_width + SPAWN_OFFSET_X,
            gap_top=gap_top,
            gap_height=gap,
            width=p.obstacle_width,
        )
        pickup = self._make_pickup(obstacle, score)

        obstacles.append(obstacle)
        pickups.append(pickup)
        self.previous_gap = (gap_top, gap)

        logger.debug(
            f"Spawned obstacle gap=[{gap_top}, {gap_top + gap}] "
            f"pickup={pickup.label}{pickup.value:+d} at ({pickup.x:.0f}, {pickup.y:.0f})"
        )
        return obstacle, pickup

    def _make_pickup(self, obstacle: Obstacle, score: int) -> Pickup:
        p = self.profile
        rng = self.rng

        if p.graded_pickups:
            grade = pick_grade(score, rng)
            value = GRADE_VALUES[grade]
        else:
            grade = None
            value = p.simple_pickup_value

        inset = p.pickup_radius
        y = obstacle.gap_top + inset + rng.random() * max(0, obstacle.gap_height - 2 * inset)

        if value < 0:
            # Outside the obstacle footprint, off the safe line
            side = -1 if rng.random() < 0.5 else 1
            offset = BAD_PICKUP_OFFSET + rng.random() * BAD_PICKUP_SPREAD
            x = obstacle.x - offset if side < 0 else obstacle.right + offset
        else:
            x = obstacle.x + obstacle.width / 2 + (rng.random() * 2 - 1) * GOOD_PICKUP_JITTER

        return Pickup(x=x, y=y, value=value, grade=grade, radius=p.pickup_radius)
