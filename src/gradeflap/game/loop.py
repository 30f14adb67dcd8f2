"""Game-loop driver.

Owns the world state and sequences one tick as
physics -> spawn -> scroll/prune -> collision -> ledger updates.
Rendering reads :meth:`GameLoop.snapshot` and never mutates anything.
"""

import logging
import random
from typing import Optional

from gradeflap.core.events import Event, EventBus, EventType
from gradeflap.core.state import State, StateMachine
from gradeflap.game import physics
from gradeflap.game.collision import CollisionDetector, CollisionReport
from gradeflap.game.entities import (
    GameState,
    ObstacleView,
    PickupView,
    Player,
    PlayerView,
    WorldSnapshot,
)
from gradeflap.game.ledger import Ledger
from gradeflap.game.profiles import GameProfile
from gradeflap.game.spawner import ObstacleSpawner

logger = logging.getLogger(__name__)

START_MESSAGE = "Click or press Space to start"


class GameLoop:
    """Runs the game: IDLE until a flap starts a run, RUNNING until a crash."""

    def __init__(
        self,
        profile: GameProfile,
        ledger: Ledger,
        event_bus: Optional[EventBus] = None,
        rng: Optional[random.Random] = None,
        state_machine: Optional[StateMachine] = None,
    ):
        self.profile = profile
        self.ledger = ledger
        self.event_bus = event_bus
        self.machine = state_machine or StateMachine()

        player = Player(x=profile.player_x, y=profile.view_height / 2)
        physics.reset(player, profile)
        self.state = GameState(player=player)

        self.spawner = ObstacleSpawner(profile, rng)
        self.detector = CollisionDetector(profile)
        self.message = START_MESSAGE

    @property
    def running(self) -> bool:
        return self.machine.state == State.RUNNING

    @property
    def player(self) -> Player:
        return self.state.player

    # Input

    def flap(self) -> None:
        """Flap while running; start a new run while idle."""
        if self.running:
            physics.flap(self.state.player, self.profile)
        else:
            self.start()

    def start(self) -> bool:
        """Begin a fresh run with one obstacle already on screen."""
        if not self.machine.can_transition(State.RUNNING):
            return False

        state = self.state
        physics.reset(state.player, self.profile)
        state.obstacles.clear()
        state.pickups.clear()
        state.frame = 0
        self.ledger.reset_score()
        self.spawner.reset()

        runs = self.machine.context.runs_started + 1
        self.machine.transition(State.RUNNING, runs_started=runs)
        self.message = ""

        self._spawn()
        logger.info(f"Run {runs} started")
        self._emit(EventType.RUN_STARTED, run=runs)
        return True

    # Tick

    def tick(self) -> Optional[CollisionReport]:
        """Advance the world by one frame. Idle ticks do nothing."""
        if not self.running:
            return None

        state = self.state
        state.frame += 1

        physics.step(state.player, self.profile)

        if state.frame % self.profile.spawn_interval == 0:
            self._spawn()

        self._scroll_and_prune()

        report = self.detector.check(state.player, state.obstacles, state.pickups)
        self._apply(report)
        return report

    def _spawn(self) -> None:
        obstacle, pickup = self.spawner.spawn(
            self.ledger.score, self.state.obstacles, self.state.pickups
        )
        self._emit(
            EventType.OBSTACLE_SPAWNED,
            gap_top=obstacle.gap_top,
            gap_height=obstacle.gap_height,
            pickup=pickup.label,
        )

    def _scroll_and_prune(self) -> None:
        speed = self.profile.scroll_speed
        cutoff = self.profile.offscreen_cutoff
        state = self.state

        for obstacle in state.obstacles:
            obstacle.x -= speed
        for pickup in state.pickups:
            pickup.x -= speed

        state.obstacles[:] = [o for o in state.obstacles if o.x + o.width >= cutoff]
        state.pickups[:] = [p for p in state.pickups if p.x + p.radius >= cutoff]

    def _apply(self, report: CollisionReport) -> None:
        ledger = self.ledger

        for _ in report.passed:
            if ledger.add_point():
                self._emit(EventType.HIGH_SCORE, high_score=ledger.high_score)
            self._emit(EventType.SCORE_CHANGED, score=ledger.score)

        for pickup in report.collected:
            balance = ledger.adjust_coins(pickup.value)
            logger.debug(f"Collected {pickup.label} ({pickup.value:+d}), coins={balance}")
            self._emit(
                EventType.PICKUP_COLLECTED,
                label=pickup.label,
                value=pickup.value,
            )
            self._emit(EventType.COINS_CHANGED, coins=balance)

        if report.crashed:
            self._end_run(report.cause)

    def _end_run(self, cause: Optional[str]) -> None:
        score = self.ledger.score
        self.machine.transition(State.IDLE, last_score=score)
        self.ledger.record_high_score()
        self.ledger.save()
        self.message = f"Game Over - Score: {score}. Press Space to restart"
        logger.info(f"Run ended by {cause} with score {score}")
        self._emit(EventType.RUN_ENDED, score=score, cause=cause)

    # Read side

    def snapshot(self) -> WorldSnapshot:
        """Immutable view of the current frame for rendering."""
        p = self.profile
        player = self.state.player
        return WorldSnapshot(
            view_size=(p.view_width, p.view_height),
            ground_y=p.ground_y,
            player=PlayerView(
                x=player.x,
                y=player.y,
                width=player.width,
                height=player.height,
                tilt=physics.tilt(player),
                skin=self.ledger.selected_skin,
            ),
            obstacles=tuple(
                ObstacleView(o.x, o.gap_top, o.gap_height, o.width)
                for o in self.state.obstacles
            ),
            pickups=tuple(
                PickupView(c.x, c.y, c.radius, c.label, c.value)
                for c in self.state.pickups
                if not c.collected
            ),
            score=self.ledger.score,
            high_score=self.ledger.high_score,
            coins=self.ledger.coins,
            running=self.running,
            message=self.message,
        )

    def _emit(self, event_type: EventType, **data) -> None:
        if self.event_bus is not None:
            self.event_bus.emit(Event(event_type, data=data, source="game"))
