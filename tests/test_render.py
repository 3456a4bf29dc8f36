import random

import pygame
import pytest

from raycaster.game_map import parse_map
from raycaster.player import Player
from raycaster.rain import RAIN_COLOR, Rain
from raycaster.raycast import SCREEN_HEIGHT, SCREEN_WIDTH, cast_all
from raycaster.render import (
    render_ceiling,
    render_floor,
    render_rain,
    render_scene,
    render_walls,
    render_weapon,
    weapon_rect,
)
from raycaster.textures import (
    CEILING_COLOR,
    FLOOR_COLOR,
    WALL_COLOR,
    WEAPON_COLOR,
    Texture,
    TextureSet,
)

BLACK = (0, 0, 0)


def _rgb(color):
    return tuple(color)[:3]


def _solid(color, size=(8, 8)):
    surface = pygame.Surface(size)
    surface.fill(color)
    return Texture(surface)


@pytest.fixture
def screen():
    surface = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
    surface.fill(BLACK)
    return surface


@pytest.fixture
def boxed_map():
    return parse_map(["########"] + ["#......#"] * 6 + ["########"])


def test_ceiling_fills_top_half(screen):
    render_ceiling(screen, _solid(CEILING_COLOR))
    assert _rgb(screen.get_at((0, 0))) == CEILING_COLOR
    assert _rgb(screen.get_at((SCREEN_WIDTH - 1, SCREEN_HEIGHT // 2 - 1))) == CEILING_COLOR
    assert _rgb(screen.get_at((0, SCREEN_HEIGHT // 2))) == BLACK


def test_floor_fills_bottom_half(screen):
    render_floor(screen, _solid(FLOOR_COLOR))
    assert _rgb(screen.get_at((0, SCREEN_HEIGHT // 2))) == FLOOR_COLOR
    assert _rgb(screen.get_at((SCREEN_WIDTH - 1, SCREEN_HEIGHT - 1))) == FLOOR_COLOR
    assert _rgb(screen.get_at((0, SCREEN_HEIGHT // 2 - 1))) == BLACK


@pytest.mark.parametrize("size", [(64, 64), (30, 10), (5, 40)])
def test_weapon_rect_is_scaled_bottom_centre(size):
    rect = weapon_rect(*size, 2.0)
    assert rect.size == (size[0] * 2, size[1] * 2)
    assert rect.bottom == SCREEN_HEIGHT
    assert abs((rect.left + rect.right) - SCREEN_WIDTH) <= 1


def test_weapon_drawn_inside_its_rect(screen):
    texture = _solid(WEAPON_COLOR, (16, 16))
    render_weapon(screen, texture)
    rect = weapon_rect(16, 16)
    assert _rgb(screen.get_at(rect.center)) == WEAPON_COLOR
    assert _rgb(screen.get_at((rect.left, rect.bottom - 1))) == WEAPON_COLOR
    assert _rgb(screen.get_at((rect.left - 1, rect.bottom - 1))) == BLACK
    assert _rgb(screen.get_at((rect.centerx, rect.top - 1))) == BLACK


def test_rain_segments_are_drawn(screen):
    rain = Rain(count=5, rng=random.Random(7))
    render_rain(screen, rain)
    for (x, y), _ in rain.segments():
        if y < SCREEN_HEIGHT:
            assert _rgb(screen.get_at((x, y))) == RAIN_COLOR[:3]


def test_walls_drawn_per_column(screen, boxed_map):
    texture = _solid(WALL_COLOR)
    player = Player()
    render_walls(screen, texture, boxed_map, player)
    walls = cast_all(boxed_map, player, texture.width, texture.height)
    for column in (0, SCREEN_WIDTH // 2, SCREEN_WIDTH - 1):
        wall = walls[column]
        expected = _rgb(texture.shaded(wall.brightness).get_at((0, 0)))
        assert expected != BLACK
        assert _rgb(screen.get_at((column, wall.top + wall.height // 2))) == expected
        assert wall.top > 0
        assert _rgb(screen.get_at((column, wall.top - 1))) == BLACK


def _scene_textures():
    return TextureSet(
        wall=_solid(WALL_COLOR),
        ceiling=_solid(CEILING_COLOR),
        floor=_solid(FLOOR_COLOR),
        weapon=_solid(WEAPON_COLOR),
    )


def test_scene_without_rain(screen, boxed_map):
    rain = Rain(count=1, rng=random.Random(1))
    rain.drops[0].x, rain.drops[0].y = 10.0, 10.0
    render_scene(screen, _scene_textures(), boxed_map, Player(), rain, False)
    assert _rgb(screen.get_at((0, 0))) == CEILING_COLOR
    assert _rgb(screen.get_at((0, SCREEN_HEIGHT - 1))) == FLOOR_COLOR
    assert _rgb(screen.get_at((SCREEN_WIDTH // 2, SCREEN_HEIGHT - 1))) == WEAPON_COLOR
    assert _rgb(screen.get_at((10, 12))) == CEILING_COLOR


def test_scene_with_rain(screen, boxed_map):
    rain = Rain(count=1, rng=random.Random(1))
    rain.drops[0].x, rain.drops[0].y = 10.0, 10.0
    render_scene(screen, _scene_textures(), boxed_map, Player(), rain, True)
    assert _rgb(screen.get_at((10, 12))) == RAIN_COLOR[:3]
    assert _rgb(screen.get_at((11, 12))) == CEILING_COLOR