"""Player position, orientation and collision-checked movement."""

from __future__ import annotations

import math
from dataclasses import dataclass

from raycaster.game_map import GameMap

MOVE_SPEED = 0.005
TURN_SPEED = 0.009


@dataclass
class Player:
    """The viewer: a position on the map and a facing angle in radians."""

    x: float = 3.5
    y: float = 3.5
    angle: float = 1.0

    def rotate(self, delta: float) -> None:
        """Turn by ``delta`` radians."""
        self.angle += delta

    def try_move(self, game_map: GameMap, dx: float, dy: float) -> tuple[bool, bool]:
        """Move by (dx, dy), checking each axis separately so walls can be slid along.

        Returns whether the x and y components were applied.
        """
        moved_x = not game_map.is_wall(self.x + dx, self.y)
        if moved_x:
            self.x += dx
        moved_y = not game_map.is_wall(self.x, self.y + dy)
        if moved_y:
            self.y += dy
        return moved_x, moved_y


def movement_vector(
    angle: float,
    forward: bool,
    backward: bool,
    strafe_left: bool,
    strafe_right: bool,
    speed: float = MOVE_SPEED,
) -> tuple[float, float]:
    """Sum the displacement for the held movement keys."""
    dx = dy = 0.0
    if forward:
        dx += math.cos(angle) * speed
        dy += math.sin(angle) * speed
    if backward:
        dx -= math.cos(angle) * speed
        dy -= math.sin(angle) * speed
    if strafe_left:
        dx += math.cos(angle - math.pi / 2) * speed
        dy += math.sin(angle - math.pi / 2) * speed
    if strafe_right:
        dx += math.cos(angle + math.pi / 2) * speed
        dy += math.sin(angle + math.pi / 2) * speed
    return dx, dy