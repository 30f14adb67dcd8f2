"""Game core: physics, spawning, collisions, ledger and the loop driver."""

from gradeflap.game.entities import Grade, GRADE_VALUES, Obstacle, Pickup, Player, WorldSnapshot
from gradeflap.game.profiles import GameProfile
from gradeflap.game.ledger import Ledger
from gradeflap.game.loop import GameLoop
from gradeflap.game.shop import Shop, SKINS

__all__ = [
    "Grade",
    "GRADE_VALUES",
    "Obstacle",
    "Pickup",
    "Player",
    "WorldSnapshot",
    "GameProfile",
    "Ledger",
    "GameLoop",
    "Shop",
    "SKINS",
]
