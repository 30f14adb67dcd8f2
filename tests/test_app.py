import json

import pytest

from gradeflap.config.settings import Settings
from gradeflap.core.events import Event, EventType, flap_event, tick_event
from gradeflap.simulator.main import GradeFlapApp


@pytest.fixture
def save_path(tmp_path):
    return tmp_path / "save.json"


@pytest.fixture
def app(monkeypatch, save_path):
    monkeypatch.setenv("GRADEFLAP_STORAGE__DATA_PATH", str(save_path))
    monkeypatch.setenv("GRADEFLAP_AUDIO__ENABLED", "false")
    monkeypatch.delenv("GRADEFLAP_PROFILE", raising=False)
    return GradeFlapApp(Settings(_env_file=None))


def emit(app, event_type, **data):
    app.event_bus.emit(Event(event_type, data=data, source="test"))


def crash(app):
    """Tick until the falling player hits the ground."""
    for frame in range(500):
        if not app.loop.running:
            return
        app.event_bus.emit(tick_event(0.016, frame))
    raise AssertionError("run never ended")


def highlighted(app):
    return [row.name for row in app.window._shop.rows if row.highlighted]


def test_flap_starts_run_and_ticks_render(app):
    app.event_bus.emit(flap_event())
    assert app.loop.running

    app.event_bus.emit(tick_event(0.016, 0))
    frame = app.window._frame
    assert frame.shape == (640, 480, 3)
    assert app.window._snapshot.running


def test_shop_stays_closed_while_running(app):
    app.event_bus.emit(flap_event())
    emit(app, EventType.OPEN_SHOP)

    assert not app._shop_open
    assert app.window._shop is None


def test_shop_opens_between_runs_and_blocks_flaps(app):
    app.event_bus.emit(flap_event())
    crash(app)

    emit(app, EventType.OPEN_SHOP)
    assert app._shop_open
    assert len(app.window._shop.rows) == 17

    app.event_bus.emit(flap_event())
    assert not app.loop.running

    # Ticks do not advance the world behind the shop
    frame = app.loop.state.frame
    app.event_bus.emit(tick_event(0.016, 1))
    assert app.loop.state.frame == frame

    emit(app, EventType.CLOSE_SHOP)
    assert app.window._shop is None
    app.event_bus.emit(flap_event())
    assert app.loop.running


def test_shop_cursor_wraps(app):
    emit(app, EventType.OPEN_SHOP)
    assert highlighted(app) == ["Default"]

    emit(app, EventType.SHOP_PREV)
    assert highlighted(app) == ["Shadow (HS60)"]

    emit(app, EventType.SHOP_NEXT)
    emit(app, EventType.SHOP_NEXT)
    assert highlighted(app) == ["Frost"]


def test_cursor_ignored_when_shop_closed(app):
    emit(app, EventType.SHOP_NEXT)
    assert app._shop_index == 0


def test_confirm_emits_shop_action(app):
    results = []
    app.event_bus.subscribe(EventType.SHOP_ACTION, results.append)

    emit(app, EventType.OPEN_SHOP)
    emit(app, EventType.SHOP_NEXT)
    emit(app, EventType.SHOP_CONFIRM)
    assert results[-1].data == {"skin": "frost", "success": False}
    assert app.window._shop.message == "Not enough coins"

    app.ledger.adjust_coins(5)
    emit(app, EventType.SHOP_CONFIRM)
    assert results[-1].data == {"skin": "frost", "success": True}
    assert app.ledger.owns("frost")
    assert app.window._shop.coins == 0


def test_run_end_applies_score_unlocks(app):
    app.ledger.high_score = 12
    emit(app, EventType.RUN_ENDED, score=12, cause="ground")
    assert app.ledger.owns("hs10")
    assert not app.ledger.owns("hs20")


def test_shutdown_saves_progress(app, save_path):
    app.ledger.coins = 9
    emit(app, EventType.SHUTDOWN)
    assert json.loads(save_path.read_text(encoding="utf-8"))["bull_coins"] == "9"
