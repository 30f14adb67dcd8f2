"""Cosmetic skin catalog and purchase rules."""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional, Tuple

from gradeflap.game.ledger import DEFAULT_SKIN, Ledger

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class Skin:
    """A purchasable or unlockable bull skin."""

    id: str
    name: str
    body: Color
    horns: Color = (245, 235, 210)
    cost: int = 0
    unlock_score: Optional[int] = None


SKINS: Tuple[Skin, ...] = (
    # Free default
    Skin("default", "Default", body=(150, 95, 55)),
    # Budget
    Skin("frost", "Frost", body=(170, 220, 245), cost=5),
    Skin("flame", "Flame", body=(240, 110, 40), cost=8),
    # Medium
    Skin("gray", "Steel Gray", body=(130, 135, 145), cost=12),
    Skin("black", "Midnight", body=(35, 35, 50), cost=15),
    Skin("red", "Raging Red", body=(200, 40, 40), cost=10),
    Skin("cowboy", "Cowboy", body=(160, 110, 60), horns=(90, 60, 30), cost=20),
    Skin("emerald", "Emerald", body=(40, 170, 100), cost=25),
    Skin("gold", "Golden", body=(235, 190, 50), cost=25),
    Skin("party", "Party", body=(230, 90, 200), horns=(80, 230, 250), cost=30),
    Skin("royal", "Royal", body=(110, 60, 190), horns=(255, 215, 0), cost=40),
    # High score unlocks
    Skin("hs10", "Skilled (HS10)", body=(170, 220, 245), unlock_score=10),
    Skin("hs20", "Expert (HS20)", body=(240, 110, 40), unlock_score=20),
    Skin("hs30", "Master (HS30)", body=(40, 170, 100), unlock_score=30),
    Skin("hs40", "Legend (HS40)", body=(110, 60, 190), unlock_score=40),
    Skin("hs50", "Champion (HS50)", body=(250, 250, 250), horns=(255, 215, 0), unlock_score=50),
    Skin("shadow", "Shadow (HS60)", body=(15, 15, 20), horns=(200, 30, 30), unlock_score=60),
)


class SkinStatus(Enum):
    EQUIPPED = auto()
    OWNED = auto()
    LOCKED = auto()
    FOR_SALE = auto()
    FREE = auto()


@dataclass
class ShopResult:
    """Outcome of a shop action."""

    success: bool
    skin_id: str
    message: str = ""


class Shop:
    """Buy, unlock and equip skins against a ledger.

    Score-locked skins become owned automatically once the high score
    reaches their threshold (see :meth:`apply_score_unlocks`).
    """

    def __init__(self, ledger: Ledger, catalog: Tuple[Skin, ...] = SKINS):
        self.ledger = ledger
        self.catalog = catalog

    def get(self, skin_id: str) -> Optional[Skin]:
        for skin in self.catalog:
            if skin.id == skin_id:
                return skin
        return None

    def skin_for(self, skin_id: str) -> Skin:
        """Catalog entry for an id, falling back to the default skin."""
        return self.get(skin_id) or self.get(DEFAULT_SKIN) or self.catalog[0]

    @property
    def selected(self) -> Skin:
        return self.skin_for(self.ledger.selected_skin)

    def status(self, skin: Skin) -> SkinStatus:
        if self.ledger.owns(skin.id):
            if self.ledger.selected_skin == skin.id:
                return SkinStatus.EQUIPPED
            return SkinStatus.OWNED
        if skin.unlock_score and self.ledger.high_score < skin.unlock_score:
            return SkinStatus.LOCKED
        if skin.cost > 0:
            return SkinStatus.FOR_SALE
        return SkinStatus.FREE

    def label(self, skin: Skin) -> str:
        """Short price/requirement text for a catalog card."""
        if skin.cost > 0:
            return f"{skin.cost} coins"
        if skin.unlock_score:
            return f"Unlock at HS {skin.unlock_score}"
        return "Free"

    def apply_score_unlocks(self) -> List[str]:
        """Grant every score-locked skin the high score has reached."""
        granted = []
        for skin in self.catalog:
            if (
                skin.unlock_score
                and self.ledger.high_score >= skin.unlock_score
                and not self.ledger.owns(skin.id)
            ):
                self.ledger.grant_skin(skin.id)
                granted.append(skin.id)
        if granted:
            logger.info(f"Unlocked by high score: {', '.join(granted)}")
        return granted

    def buy(self, skin_id: str) -> ShopResult:
        skin = self.get(skin_id)
        if skin is None:
            return ShopResult(False, skin_id, "Unknown skin")
        if self.ledger.owns(skin_id):
            return ShopResult(False, skin_id, "Already owned")
        if self.status(skin) == SkinStatus.LOCKED:
            return ShopResult(False, skin_id, "Locked")
        if not self.ledger.spend(skin.cost):
            return ShopResult(False, skin_id, "Not enough coins")

        self.ledger.grant_skin(skin_id)
        logger.info(f"Bought skin {skin_id} for {skin.cost} coins")
        return ShopResult(True, skin_id, f"Bought {skin.name}")

    def unlock(self, skin_id: str) -> ShopResult:
        """Take a free skin that is not yet owned."""
        skin = self.get(skin_id)
        if skin is None:
            return ShopResult(False, skin_id, "Unknown skin")
        if self.status(skin) != SkinStatus.FREE:
            return ShopResult(False, skin_id, "Not free")
        self.ledger.grant_skin(skin_id)
        return ShopResult(True, skin_id, f"Unlocked {skin.name}")

    def equip(self, skin_id: str) -> ShopResult:
        if not self.ledger.select_skin(skin_id):
            return ShopResult(False, skin_id, "Not owned")
        logger.info(f"Equipped skin {skin_id}")
        return ShopResult(True, skin_id, "Equipped")

    def activate(self, skin_id: str) -> ShopResult:
        """Perform whatever the skin's card button would do."""
        skin = self.get(skin_id)
        if skin is None:
            return ShopResult(False, skin_id, "Unknown skin")

        status = self.status(skin)
        if status == SkinStatus.EQUIPPED:
            return ShopResult(False, skin_id, "Already equipped")
        if status == SkinStatus.OWNED:
            return self.equip(skin_id)
        if status == SkinStatus.LOCKED:
            return ShopResult(False, skin_id, "Locked")
        if status == SkinStatus.FOR_SALE:
            return self.buy(skin_id)
        return self.unlock(skin_id)
