from gradeflap.audio.engine import AudioEngine, sine, square, triangle
from gradeflap.core.events import Event, EventBus, EventType


def test_oscillators_stay_in_range():
    for i in range(200):
        t = i / 1000
        assert -1 <= square(t, 440) <= 1
        assert -1 <= triangle(t, 440) <= 1
        assert -1 <= sine(t, 440) <= 1


def test_play_without_mixer_is_silent():
    engine = AudioEngine()
    assert not engine.available
    assert engine.play("flap") is None


def test_toggle_mute():
    engine = AudioEngine()
    assert engine.toggle_mute() is True
    assert engine.toggle_mute() is False


def test_events_pick_sounds(monkeypatch):
    engine = AudioEngine()
    played = []
    monkeypatch.setattr(engine, "play", lambda name, volume=1.0: played.append(name))

    bus = EventBus()
    engine.attach(bus)
    bus.emit(Event(EventType.PICKUP_COLLECTED, data={"label": "A", "value": 5}))
    bus.emit(Event(EventType.PICKUP_COLLECTED, data={"label": "F", "value": -5}))
    bus.emit(Event(EventType.SHOP_ACTION, data={"skin": "gold", "success": False}))
    bus.emit(Event(EventType.RUN_ENDED, data={"score": 3, "cause": "ground"}))

    assert played == ["pickup_good", "pickup_bad", "error", "crash"]
