"""Drawing the ceiling, floor, walls, weapon and rain onto a surface."""

from __future__ import annotations

import pygame

from raycaster.game_map import GameMap
from raycaster.player import Player
from raycaster.rain import RAIN_COLOR, Rain
from raycaster.raycast import SCREEN_HEIGHT, SCREEN_WIDTH, cast_all
from raycaster.textures import Texture, TextureSet

WEAPON_SCALE = 2.0


def render_ceiling(screen: pygame.Surface, texture: Texture) -> None:
    """Stretch the ceiling texture over the top half of the screen."""
    screen.blit(texture.scaled((SCREEN_WIDTH, SCREEN_HEIGHT // 2)), (0, 0))


def render_floor(screen: pygame.Surface, texture: Texture) -> None:
    """Stretch the floor texture over the bottom half of the screen."""
    screen.blit(texture.scaled((SCREEN_WIDTH, SCREEN_HEIGHT // 2)), (0, SCREEN_HEIGHT // 2))


def render_walls(
    screen: pygame.Surface, texture: Texture, game_map: GameMap, player: Player
) -> None:
    """Draw one textured, shaded wall slice per screen column."""
    if texture.width <= 0 or texture.height <= 0:
        return
    for wall in cast_all(game_map, player, texture.width, texture.height):
        if wall.height <= 0:
            continue
        source = texture.shaded(wall.brightness)
        texture_x = min(max(wall.texture_x, 0), texture.width - 1)
        column = source.subsurface((texture_x, 0, 1, texture.height))
        screen.blit(pygame.transform.scale(column, (1, wall.height)), (wall.column, wall.top))


def weapon_rect(width: int, height: int, scale: float = WEAPON_SCALE) -> pygame.Rect:
    """Where a weapon image of the given size is drawn: scaled, bottom centre."""
    w = int(width * scale)
    h = int(height * scale)
    return pygame.Rect(int((SCREEN_WIDTH - w) / 2), SCREEN_HEIGHT - h, w, h)


def render_weapon(screen: pygame.Surface, texture: Texture) -> None:
    """Draw the weapon scaled at the bottom centre of the screen."""
    rect = weapon_rect(texture.width, texture.height)
    if rect.width > 0 and rect.height > 0:
        screen.blit(texture.scaled(rect.size), rect.topleft)


def render_rain(screen: pygame.Surface, rain: Rain) -> None:
    """Draw each raindrop as a short vertical line."""
    color = RAIN_COLOR[:3]
    for start, end in rain.segments():
        pygame.draw.line(screen, color, start, end)


def render_scene(
    screen: pygame.Surface,
    textures: TextureSet,
    game_map: GameMap,
    player: Player,
    rain: Rain,
    rain_on: bool,
) -> None:
    """Draw the whole frame: ceiling, floor, walls, weapon, then rain if enabled."""
    render_ceiling(screen, textures.ceiling)
    render_floor(screen, textures.floor)
    render_walls(screen, textures.wall, game_map, player)
    render_weapon(screen, textures.weapon)
    if rain_on:
        render_rain(screen, rain)