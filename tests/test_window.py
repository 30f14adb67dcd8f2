import pytest

from gradeflap.core.events import EventBus
from gradeflap.simulator.window import GameWindow, WindowConfig, visible_rows


def test_short_list_shows_everything():
    assert visible_rows(5, 4, capacity=10) == (0, 5)


@pytest.mark.parametrize("selected", range(17))
def test_selected_row_always_in_view(selected):
    start, end = visible_rows(17, selected, capacity=6)
    assert end - start == 6
    assert 0 <= start <= selected < end <= 17


def test_window_sticks_to_list_ends():
    assert visible_rows(17, 0, capacity=6) == (0, 6)
    assert visible_rows(17, 16, capacity=6) == (11, 17)


def test_scaled_size():
    config = WindowConfig(view_width=480, view_height=640, scale=0.5)
    assert config.size == (240, 320)


def test_stop_ends_loop_flag():
    bus = EventBus()
    window = GameWindow(WindowConfig(), bus)
    window._running = True
    window.stop()
    assert not window._running
