import random

import pytest

from gradeflap.core.events import EventBus
from gradeflap.game.entities import Player
from gradeflap.game.ledger import Ledger
from gradeflap.game.loop import GameLoop
from gradeflap.game.profiles import GameProfile
from gradeflap.storage.base import MemoryStore


class FixedRandom:
    """Stands in for random.Random where a test needs one exact draw."""

    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def profile():
    return GameProfile.graded()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def ledger(store):
    return Ledger(store)


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def loop(profile, ledger, bus, rng):
    return GameLoop(profile, ledger, event_bus=bus, rng=rng)


@pytest.fixture
def player(profile):
    return Player(
        x=profile.player_x,
        y=profile.view_height / 2,
        width=profile.player_width,
        height=profile.player_height,
    )
