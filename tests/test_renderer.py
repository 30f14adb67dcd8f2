from dataclasses import replace

import pytest

from gradeflap.game.entities import ObstacleView, PickupView, PlayerView, WorldSnapshot
from gradeflap.graphics.renderer import Palette, Renderer


@pytest.fixture
def snapshot():
    return WorldSnapshot(
        view_size=(480, 640),
        ground_y=580,
        player=PlayerView(x=80, y=320, width=48, height=36, tilt=0.0, skin="default"),
        obstacles=(ObstacleView(x=200, gap_top=200, gap_height=150, width=60),),
        pickups=(
            PickupView(x=350, y=450, radius=20, label="A", value=5),
            PickupView(x=420, y=100, radius=20, label="F", value=-5),
        ),
        score=3,
        high_score=10,
        coins=4,
        running=True,
    )


def pixel(frame, x, y):
    return tuple(int(c) for c in frame[y, x])


def test_frame_shape(snapshot):
    frame = Renderer(480, 640).render(snapshot)
    assert frame.shape == (640, 480, 3)


def test_scene_colors(snapshot):
    palette = Palette()
    frame = Renderer(480, 640, palette).render(snapshot)

    assert pixel(frame, 400, 40) == palette.sky
    assert pixel(frame, 10, 620) == palette.ground
    # Upper wall, lower wall, and the open gap between them
    assert pixel(frame, 230, 100) == palette.pipe
    assert pixel(frame, 230, 450) == palette.pipe
    assert pixel(frame, 230, 275) == palette.sky


def test_pickup_colors_by_sign(snapshot):
    palette = Palette()
    frame = Renderer(480, 640, palette).render(snapshot)
    assert pixel(frame, 350, 462) == palette.good_pickup
    assert pixel(frame, 420, 112) == palette.bad_pickup


def test_player_uses_selected_skin(snapshot):
    frame = Renderer(480, 640).render(snapshot)
    assert pixel(frame, 80, 320) == (150, 95, 55)


def test_unknown_skin_falls_back_to_default(snapshot):
    odd = replace(snapshot, player=replace(snapshot.player, skin="missing"))
    frame = Renderer(480, 640).render(odd)
    assert pixel(frame, 80, 320) == (150, 95, 55)


def test_render_does_not_mutate_snapshot(snapshot):
    before = repr(snapshot)
    Renderer(480, 640).render(snapshot)
    assert repr(snapshot) == before
