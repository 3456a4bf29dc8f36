"""The interactive game window and its command-line entry point."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

import pygame

from raycaster.game_map import MapError, load_map
from raycaster.player import TURN_SPEED, Player, movement_vector
from raycaster.rain import Rain
from raycaster.raycast import SCREEN_HEIGHT, SCREEN_WIDTH
from raycaster.render import render_scene
from raycaster.textures import load_textures

WINDOW_TITLE = "Raycasting"


def run(map_path: str | os.PathLike[str]) -> Player:
    """Open the window and play on the given map until it is closed.

    Textures are read from the working directory. Returns the player's
    final state.
    """
    game_map = load_map(map_path)
    pygame.display.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        textures = load_textures()
        rain = Rain()
        player = Player()
        rain_on = False
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_r:
                    rain_on = not rain_on
            keys = pygame.key.get_pressed()
            if keys[pygame.K_LEFT]:
                player.rotate(-TURN_SPEED)
            if keys[pygame.K_RIGHT]:
                player.rotate(TURN_SPEED)
            dx, dy = movement_vector(
                player.angle,
                bool(keys[pygame.K_w]),
                bool(keys[pygame.K_s]),
                bool(keys[pygame.K_a]),
                bool(keys[pygame.K_d]),
            )
            player.try_move(game_map, dx, dy)
            if rain_on:
                rain.update()
            screen.fill((0, 0, 0))
            render_scene(screen, textures, game_map, player, rain, rain_on)
            pygame.display.flip()
        return player
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point; returns the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: raycaster <map_file>")
        return 1
    try:
        run(args[0])
    except MapError as exc:
        print(f"Error: {exc}")
        print("Error loading map from file.")
        return 1
    except pygame.error as exc:
        print(f"SDL Error: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())