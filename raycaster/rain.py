"""Falling rain particles drawn over the scene."""

from __future__ import annotations

import random
from collections.abc import Iterator
from dataclasses import dataclass

from raycaster.raycast import SCREEN_HEIGHT, SCREEN_WIDTH

NUM_RAINDROPS = 1000
RAIN_COLOR = (200, 200, 255, 200)
DROP_LENGTH = 5

Segment = tuple[tuple[int, int], tuple[int, int]]


@dataclass
class Raindrop:
    x: float
    y: float
    speed: float


class Rain:
    """A set of raindrops falling down a screen of the given size."""

    def __init__(
        self,
        count: int = NUM_RAINDROPS,
        width: int = SCREEN_WIDTH,
        height: int = SCREEN_HEIGHT,
        rng: random.Random | None = None,
    ) -> None:
        rng = rng if rng is not None else random.Random()
        self.width = width
        self.height = height
        self.drops = [
            Raindrop(
                x=float(rng.randrange(width)),
                y=float(rng.randrange(height)),
                speed=2.0 + rng.randrange(3),
            )
            for _ in range(count)
        ]

    def __len__(self) -> int:
        return len(self.drops)

    def __iter__(self) -> Iterator[Raindrop]:
        return iter(self.drops)

    def update(self) -> None:
        """Advance every drop; drops past the bottom restart at the top."""
        for drop in self.drops:
            drop.y += drop.speed
            if drop.y > self.height:
                drop.y = 0.0

    def segments(self) -> Iterator[Segment]:
        """Yield the vertical line segment drawn for each drop."""
        for drop in self.drops:
            x, y = int(drop.x), int(drop.y)
            yield (x, y), (x, y + DROP_LENGTH)