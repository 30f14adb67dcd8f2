import json

from gradeflap.game.ledger import (
    KEY_COINS,
    KEY_HIGH_SCORE,
    KEY_OWNED,
    KEY_SELECTED,
    Ledger,
)
from gradeflap.storage.base import MemoryStore


def test_fresh_store_defaults(ledger):
    assert ledger.score == 0
    assert ledger.high_score == 0
    assert ledger.coins == 0
    assert ledger.owned_skins == ["default"]
    assert ledger.selected_skin == "default"


def test_loads_persisted_values():
    store = MemoryStore({
        KEY_HIGH_SCORE: "42",
        KEY_COINS: "17",
        KEY_OWNED: json.dumps(["default", "gold"]),
        KEY_SELECTED: "gold",
    })
    ledger = Ledger(store)
    assert ledger.high_score == 42
    assert ledger.coins == 17
    assert ledger.owned_skins == ["default", "gold"]
    assert ledger.selected_skin == "gold"


def test_malformed_values_fall_back_to_defaults():
    store = MemoryStore({
        KEY_HIGH_SCORE: "lots",
        KEY_COINS: "-12",
        KEY_OWNED: "{not json",
        KEY_SELECTED: "gold",
    })
    ledger = Ledger(store)
    assert ledger.high_score == 0
    assert ledger.coins == 0
    assert ledger.owned_skins == ["default"]
    # Not owned, so the selection falls back
    assert ledger.selected_skin == "default"


def test_owned_list_always_contains_default():
    store = MemoryStore({KEY_OWNED: json.dumps(["gold", "gold", 3])})
    ledger = Ledger(store)
    assert ledger.owned_skins == ["default", "gold"]


def test_negative_pickup_floors_coins_at_zero(ledger, store):
    assert ledger.adjust_coins(-5) == 0
    assert ledger.coins == 0
    assert store.get(KEY_COINS) == "0"


def test_coin_changes_are_written_through(ledger, store):
    ledger.adjust_coins(5)
    ledger.adjust_coins(-2)
    assert ledger.coins == 3
    assert store.get(KEY_COINS) == "3"


def test_high_score_persists_only_when_beaten(ledger, store):
    ledger.high_score = 2
    ledger.add_point()
    ledger.add_point()
    assert store.get(KEY_HIGH_SCORE) is None

    assert ledger.add_point() is True
    assert ledger.high_score == 3
    assert store.get(KEY_HIGH_SCORE) == "3"


def test_reset_score_keeps_high_score(ledger):
    ledger.add_point()
    ledger.reset_score()
    assert ledger.score == 0
    assert ledger.high_score == 1


def test_spend(ledger):
    ledger.adjust_coins(10)
    assert not ledger.spend(11)
    assert ledger.coins == 10
    assert ledger.spend(10)
    assert ledger.coins == 0
    assert not ledger.spend(-1)


def test_skins_grant_and_select(ledger, store):
    assert not ledger.select_skin("gold")
    assert ledger.grant_skin("gold")
    assert not ledger.grant_skin("gold")
    assert ledger.select_skin("gold")
    assert json.loads(store.get(KEY_OWNED)) == ["default", "gold"]
    assert store.get(KEY_SELECTED) == "gold"


def test_state_survives_reload(ledger, store):
    ledger.adjust_coins(8)
    ledger.grant_skin("gold")
    ledger.select_skin("gold")
    ledger.add_point()

    reloaded = Ledger(store)
    assert reloaded.coins == 8
    assert reloaded.high_score == 1
    assert reloaded.selected_skin == "gold"
    assert reloaded.score == 0
