"""Ray marching through the map to produce one textured wall slice per column."""

from __future__ import annotations

import math
from dataclasses import dataclass

from raycaster.game_map import GameMap
from raycaster.player import Player

SCREEN_WIDTH = 1300
SCREEN_HEIGHT = 700
FOV = 60.0
NUM_RAYS = SCREEN_WIDTH
RAY_STEP = 0.001
WALL_SCALE = 300.0
LIT = 255
SHADED = 130


@dataclass(frozen=True)
class WallSlice:
    """One screen column of wall: which texture column to draw and where."""

    column: int
    texture_x: int
    texture_height: int
    top: int
    height: int
    brightness: int
    distance: float

    @property
    def source_rect(self) -> tuple[int, int, int, int]:
        return (self.texture_x, 0, 1, self.texture_height)

    @property
    def dest_rect(self) -> tuple[int, int, int, int]:
        return (self.column, self.top, 1, self.height)


def _first_wall_distance(game_map: GameMap, x: float, y: float, dx: float, dy: float) -> float:
    """Distance along a unit ray to the first cell that is (or may be) a wall."""
    cell_x, cell_y = math.floor(x), math.floor(y)
    if game_map.is_wall(cell_x, cell_y):
        return 0.0
    step_x = 1 if dx > 0 else -1
    step_y = 1 if dy > 0 else -1
    if dx:
        next_x = ((cell_x + 1 - x) if dx > 0 else (x - cell_x)) / abs(dx)
        span_x = 1 / abs(dx)
    else:
        next_x = span_x = math.inf
    if dy:
        next_y = ((cell_y + 1 - y) if dy > 0 else (y - cell_y)) / abs(dy)
        span_y = 1 / abs(dy)
    else:
        next_y = span_y = math.inf
    while True:
        if next_x < next_y:
            travelled = next_x
            cell_x += step_x
            next_x += span_x
        else:
            travelled = next_y
            cell_y += step_y
            next_y += span_y
        if game_map.is_wall(cell_x, cell_y):
            return travelled


def _march(game_map: GameMap, x: float, y: float, angle: float) -> tuple[float, float]:
    """Step along the ray in fixed increments until a wall cell is reached."""
    dir_x, dir_y = math.cos(angle), math.sin(angle)
    # Every sample before the first wall boundary is open, so skip straight to it.
    step = max(0, math.floor(_first_wall_distance(game_map, x, y, dir_x, dir_y) / RAY_STEP) - 1)
    while True:
        hit_x = x + step * RAY_STEP * dir_x
        hit_y = y + step * RAY_STEP * dir_y
        if game_map.is_wall(hit_x, hit_y):
            return hit_x, hit_y
        step += 1


def cast_ray(
    game_map: GameMap,
    player: Player,
    column: int,
    texture_width: int,
    texture_height: int,
) -> WallSlice:
    """Cast the ray for one screen column and describe the wall slice it hits."""
    ray_angle = (
        player.angle
        - math.radians(FOV / 2.0)
        + column * (FOV / SCREEN_WIDTH) * (math.pi / 180.0)
    )
    hit_x, hit_y = _march(game_map, player.x, player.y, ray_angle)
    distance = math.hypot(hit_x - player.x, hit_y - player.y)
    corrected = distance * math.cos(ray_angle - player.angle)
    wall_height = WALL_SCALE / corrected if corrected > 0 else math.inf
    wall_height = min(wall_height, float(SCREEN_HEIGHT))

    offset_x = hit_x - int(hit_x)
    offset_y = hit_y - int(hit_y)
    to_vertical = min(offset_x, 1.0 - offset_x)
    to_horizontal = min(offset_y, 1.0 - offset_y)
    near_vertical = to_vertical < to_horizontal
    texture_x = int((offset_x if near_vertical else offset_y) * texture_width)

    height = int(wall_height)
    return WallSlice(
        column=column,
        texture_x=texture_x,
        texture_height=texture_height,
        top=SCREEN_HEIGHT // 2 - height // 2,
        height=height,
        brightness=LIT if near_vertical else SHADED,
        distance=distance,
    )


def cast_all(
    game_map: GameMap,
    player: Player,
    texture_width: int,
    texture_height: int,
) -> list[WallSlice]:
    """Cast one ray per screen column, left to right."""
    return [
        cast_ray(game_map, player, column, texture_width, texture_height)
        for column in range(NUM_RAYS)
    ]