"""The player circle: spawning, keyboard input and bounded movement."""

from __future__ import annotations

from collections.abc import Container
from dataclasses import dataclass

SPEED = 5.0
PLAYER_RADIUS = 30.0
PLAYER_COLOR = (0, 0, 255)

LEFT = "left"
RIGHT = "right"
UP = "up"
DOWN = "down"


@dataclass
class Player:
    """A player with a position and a per-frame direction, y pointing up."""

    x: float = 0.0
    y: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    radius: float = PLAYER_RADIUS
    color: tuple[int, int, int] = PLAYER_COLOR

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    @property
    def velocity(self) -> tuple[float, float]:
        return (self.vx, self.vy)


def spawn_player() -> Player:
    """Create a player at the origin, standing still."""
    return Player()


def player_input(player: Player, pressed: Container[str]) -> tuple[float, float]:
    """Set the player's direction from the held keys and return it.

    ``pressed`` holds any of ``"left"``, ``"right"``, ``"up"`` and ``"down"``;
    opposite keys cancel out.
    """
    vx = vy = 0.0
    if LEFT in pressed:
        vx -= 1.0
    if RIGHT in pressed:
        vx += 1.0
    if UP in pressed:
        vy += 1.0
    if DOWN in pressed:
        vy -= 1.0
    player.vx, player.vy = vx, vy
    return player.velocity


def _clamp(value: float, low: float, high: float) -> float:
    if low > high:
        raise ValueError(f"window too small: bounds {low} > {high}")
    return max(low, min(high, value))


def player_movement(
    player: Player, window_width: float, window_height: float
) -> tuple[float, float]:
    """Move the player one step, keeping it inside the window; return its position."""
    max_x = window_width / 2.0 - PLAYER_RADIUS
    max_y = window_height / 2.0 - PLAYER_RADIUS
    player.x = _clamp(player.x + player.vx * SPEED, -max_x, max_x)
    player.y = _clamp(player.y + player.vy * SPEED, -max_y, max_y)
    return player.position