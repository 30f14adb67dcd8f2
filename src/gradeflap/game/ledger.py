"""Score, high score, coins and skin ownership.

The ledger is the only component that talks to the key-value store. Every
mutation that must survive a restart rewrites all four persisted keys.
"""

import json
import logging
from typing import List

from gradeflap.storage.base import KeyValueStore

logger = logging.getLogger(__name__)

KEY_HIGH_SCORE = "bull_highscore"
KEY_COINS = "bull_coins"
KEY_OWNED = "bull_owned"
KEY_SELECTED = "bull_selected"

DEFAULT_SKIN = "default"


def _parse_int(raw, key: str) -> int:
    if raw is None:
        return 0
    try:
        return int(str(raw).strip())
    except ValueError:
        logger.warning(f"Malformed stored value for {key}: {raw!r}, using 0")
        return 0


def _parse_owned(raw) -> List[str]:
    if raw is None:
        return [DEFAULT_SKIN]
    try:
        data = json.loads(raw)
    except (TypeError, ValueError):
        logger.warning(f"Malformed stored value for {KEY_OWNED}: {raw!r}")
        return [DEFAULT_SKIN]
    if not isinstance(data, list):
        logger.warning(f"Stored {KEY_OWNED} is not a list: {raw!r}")
        return [DEFAULT_SKIN]

    owned: List[str] = []
    for item in data:
        if isinstance(item, str) and item not in owned:
            owned.append(item)
    if DEFAULT_SKIN not in owned:
        owned.insert(0, DEFAULT_SKIN)
    return owned


class Ledger:
    """Score and currency bookkeeping with write-through persistence."""

    def __init__(self, store: KeyValueStore):
        self.store = store
        self.score = 0
        self.high_score = 0
        self.coins = 0
        self.owned_skins: List[str] = [DEFAULT_SKIN]
        self.selected_skin = DEFAULT_SKIN
        self.load()

    def load(self) -> None:
        """Read persisted values, defaulting anything absent or malformed."""
        self.high_score = max(0, _parse_int(self.store.get(KEY_HIGH_SCORE), KEY_HIGH_SCORE))
        self.coins = max(0, _parse_int(self.store.get(KEY_COINS), KEY_COINS))
        self.owned_skins = _parse_owned(self.store.get(KEY_OWNED))

        selected = self.store.get(KEY_SELECTED)
        if not selected or selected not in self.owned_skins:
            if selected:
                logger.warning(f"Selected skin {selected!r} is not owned, using default")
            selected = DEFAULT_SKIN
        self.selected_skin = selected

        logger.info(
            f"Ledger loaded: high={self.high_score} coins={self.coins} "
            f"skins={len(self.owned_skins)} selected={self.selected_skin}"
        )

    def save(self) -> None:
        """Persistence hook; writes every persisted field."""
        self.store.update({
            KEY_HIGH_SCORE: str(self.high_score),
            KEY_COINS: str(self.coins),
            KEY_OWNED: json.dumps(self.owned_skins),
            KEY_SELECTED: self.selected_skin,
        })

    # Score

    def reset_score(self) -> None:
        self.score = 0

    def add_point(self) -> bool:
        """Increment the run score. Returns True on a new high score."""
        self.score += 1
        return self.record_high_score()

    def record_high_score(self) -> bool:
        """Raise the high score to the current score if exceeded."""
        if self.score <= self.high_score:
            return False
        self.high_score = self.score
        self.save()
        return True

    # Coins

    def adjust_coins(self, delta: int) -> int:
        """Apply a signed coin change, floored at zero. Returns the balance."""
        self.coins = max(0, self.coins + delta)
        self.save()
        return self.coins

    def spend(self, amount: int) -> bool:
        """Deduct ``amount`` coins if affordable."""
        if amount < 0 or amount > self.coins:
            return False
        self.coins -= amount
        self.save()
        return True

    # Skins

    def owns(self, skin_id: str) -> bool:
        return skin_id in self.owned_skins

    def grant_skin(self, skin_id: str) -> bool:
        """Add a skin to the owned set. Returns False if already owned."""
        if skin_id in self.owned_skins:
            return False
        self.owned_skins.append(skin_id)
        self.save()
        return True

    def select_skin(self, skin_id: str) -> bool:
        """Equip an owned skin."""
        if skin_id not in self.owned_skins:
            return False
        self.selected_skin = skin_id
        self.save()
        return True
