"""Wall, ceiling, floor and weapon textures, with solid-colour fallbacks."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

import pygame

FALLBACK_SIZE = (64, 64)
WALL_COLOR = (150, 150, 150)
CEILING_COLOR = (100, 100, 255)
FLOOR_COLOR = (50, 205, 50)
WEAPON_COLOR = (255, 0, 0)

RGB = tuple[int, int, int]


@dataclass(eq=False)
class Texture:
    """An image used for drawing, with cached shaded and scaled variants."""

    surface: pygame.Surface
    fallback: bool = False
    _shaded: dict[int, pygame.Surface] = field(default_factory=dict, init=False, repr=False)
    _scaled: dict[tuple[int, int], pygame.Surface] = field(
        default_factory=dict, init=False, repr=False
    )

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    def shaded(self, brightness: int) -> pygame.Surface:
        """Return the image with each colour channel scaled by ``brightness / 255``."""
        if brightness >= 255:
            return self.surface
        cached = self._shaded.get(brightness)
        if cached is None:
            cached = self.surface.copy()
            level = max(0, brightness)
            cached.fill((level, level, level), special_flags=pygame.BLEND_RGB_MULT)
            self._shaded[brightness] = cached
        return cached

    def scaled(self, size: tuple[int, int]) -> pygame.Surface:
        """Return the whole image stretched to ``size``."""
        size = (int(size[0]), int(size[1]))
        cached = self._scaled.get(size)
        if cached is None:
            cached = pygame.transform.scale(self.surface, size)
            self._scaled[size] = cached
        return cached


@dataclass
class TextureSet:
    """The four textures a scene is drawn with."""

    wall: Texture
    ceiling: Texture
    floor: Texture
    weapon: Texture


def load_texture(path: str | os.PathLike[str], fallback_color: RGB) -> Texture:
    """Load a bitmap, or make a 64x64 texture of ``fallback_color`` if it cannot be read."""
    name = os.path.basename(os.fspath(path))
    try:
        surface = pygame.image.load(os.fspath(path))
    except (pygame.error, OSError) as exc:
        print(f"Error loading {name}: {exc}")
        print(f"{name} not found. Generating fallback texture.")
        surface = pygame.Surface(FALLBACK_SIZE)
        surface.fill(fallback_color)
        return Texture(surface, fallback=True)
    return Texture(surface)


def load_textures(directory: str | os.PathLike[str] = ".") -> TextureSet:
    """Load wall.bmp, ceiling.bmp, floor.bmp and weapon.bmp from ``directory``."""
    return TextureSet(
        wall=load_texture(os.path.join(directory, "wall.bmp"), WALL_COLOR),
        ceiling=load_texture(os.path.join(directory, "ceiling.bmp"), CEILING_COLOR),
        floor=load_texture(os.path.join(directory, "floor.bmp"), FLOOR_COLOR),
        weapon=load_texture(os.path.join(directory, "weapon.bmp"), WEAPON_COLOR),
    )