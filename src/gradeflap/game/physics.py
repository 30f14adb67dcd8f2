"""Vertical motion of the player.

One call to :func:`step` is one tick. Velocity is updated and clamped
first, then the *updated* velocity moves the player.
"""

from gradeflap.game.entities import Player
from gradeflap.game.profiles import GameProfile

MAX_TILT = 0.9  # radians
TILT_DIVISOR = 12.0


def step(player: Player, profile: GameProfile) -> None:
    """Advance the player by one tick of gravity."""
    player.vy += profile.gravity
    if player.vy > profile.max_fall:
        player.vy = profile.max_fall
    player.y += player.vy


def flap(player: Player, profile: GameProfile) -> None:
    """Apply the upward impulse. Replaces the current velocity."""
    player.vy = -profile.flap_strength


def tilt(player: Player) -> float:
    """Render orientation in radians; nose down while falling."""
    return max(min(player.vy / TILT_DIVISOR, MAX_TILT), -MAX_TILT)


def reset(player: Player, profile: GameProfile) -> None:
    """Put the player back at the centre of the view, at rest."""
    player.x = profile.player_x
    player.y = profile.view_height / 2
    player.vy = 0.0
    player.width = profile.player_width
    player.height = profile.player_height
