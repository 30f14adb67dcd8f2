import pytest

from gradeflap.game.collision import CollisionDetector, hits_obstacle, inside_gap
from gradeflap.game.entities import Obstacle, Pickup, Player


@pytest.fixture
def detector(profile):
    return CollisionDetector(profile)


@pytest.fixture
def obstacle():
    # Spans x 70..130 with a gap band of 200..350
    return Obstacle(x=70, gap_top=200, gap_height=150)


def test_player_inside_gap_is_safe(detector, player, obstacle):
    player.y = 300
    assert inside_gap(player, obstacle)

    report = detector.check(player, [obstacle], [])
    assert not report.crashed
    assert report.cause is None


def test_player_one_unit_above_gap_crashes(detector, player, obstacle):
    player.y = 199 + player.height / 2
    assert player.top == 199
    assert hits_obstacle(player, obstacle)

    report = detector.check(player, [obstacle], [])
    assert report.crashed
    assert report.cause == "obstacle"


def test_player_below_gap_crashes(detector, player, obstacle):
    player.y = 351 - player.height / 2
    assert detector.check(player, [obstacle], []).crashed


def test_no_horizontal_overlap_is_safe(detector, player):
    far = Obstacle(x=300, gap_top=200, gap_height=150)
    player.y = 100
    assert not detector.check(player, [far], []).crashed


def test_ground_contact(detector, player, profile):
    player.y = profile.ground_y - player.height / 2
    report = detector.check(player, [], [])
    assert report.crashed
    assert report.cause == "ground"


def test_ceiling_contact(detector, player):
    player.y = player.height / 2
    report = detector.check(player, [], [])
    assert report.crashed
    assert report.cause == "ceiling"


def test_obstacle_passed_exactly_once(detector, player):
    player.y = 300
    # Trailing edge at 50, player's leading edge at 56
    behind = Obstacle(x=-10, gap_top=200, gap_height=150)

    first = detector.check(player, [behind], [])
    assert first.points == 1
    assert behind.passed

    second = detector.check(player, [behind], [])
    assert second.points == 0


def test_obstacle_not_passed_while_overlapping(detector, player, obstacle):
    player.y = 300
    report = detector.check(player, [obstacle], [])
    assert report.points == 0
    assert not obstacle.passed


def test_pickup_collected_exactly_once(detector, player):
    player.y = 300
    pickup = Pickup(x=player.x + 25, y=300, value=3)

    first = detector.check(player, [], [pickup])
    assert first.collected == [pickup]
    assert pickup.collected

    second = detector.check(player, [], [pickup])
    assert second.collected == []


def test_pickup_out_of_reach(detector, player):
    player.y = 300
    pickup = Pickup(x=player.x + 30, y=300, value=3)
    assert detector.check(player, [], [pickup]).collected == []
    assert not pickup.collected


def test_crash_and_pickup_in_same_pass(detector, player, profile):
    player.y = profile.ground_y
    pickup = Pickup(x=player.x, y=player.y, value=-5)
    report = detector.check(player, [], [pickup])
    assert report.crashed
    assert report.collected == [pickup]


def test_trailing_edge_level_with_player_is_not_passed_yet(detector, player):
    player.y = 300
    level = Obstacle(x=player.left - 60, gap_top=200, gap_height=150)
    assert level.right == player.left

    report = detector.check(player, [level], [])
    assert report.points == 0
    assert not report.crashed
    assert not level.passed

    level.x -= 0.5
    assert detector.check(player, [level], []).points == 1
