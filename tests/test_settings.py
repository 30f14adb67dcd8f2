from gradeflap.config.settings import Settings
from gradeflap.game.profiles import GameProfile


def test_defaults(monkeypatch):
    monkeypatch.delenv("GRADEFLAP_PROFILE", raising=False)
    settings = Settings(_env_file=None)
    assert settings.is_graded
    assert settings.display.view_width == 480
    assert settings.physics.gravity == 0.45
    assert settings.spawn.spawn_interval == 100


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("GRADEFLAP_PROFILE", "simple")
    monkeypatch.setenv("GRADEFLAP_PHYSICS__GRAVITY", "0.3")
    monkeypatch.setenv("GRADEFLAP_AUDIO__ENABLED", "false")

    settings = Settings(_env_file=None)

    assert not settings.is_graded
    assert settings.physics.gravity == 0.3
    assert settings.audio.enabled is False


def test_profile_from_settings(monkeypatch):
    monkeypatch.setenv("GRADEFLAP_PROFILE", "simple")
    monkeypatch.setenv("GRADEFLAP_SPAWN__MIN_OVERLAP", "40")

    profile = GameProfile.from_settings(Settings(_env_file=None))

    assert profile.name == "simple"
    assert not profile.graded_pickups
    assert profile.min_overlap == 40
    assert profile.ground_y == 580


def test_default_profile_matches_settings(monkeypatch):
    monkeypatch.delenv("GRADEFLAP_PROFILE", raising=False)
    assert GameProfile.from_settings(Settings(_env_file=None)) == GameProfile.graded()
