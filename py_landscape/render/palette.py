"""Colour schemes for landscape images."""

from dataclasses import dataclass
from typing import Tuple

from ..core.alea_prng import RandomSource

RGB = Tuple[int, int, int]

BLACK: RGB = (0, 0, 0)
WHITE: RGB = (255, 255, 255)


def _hex(color: RGB) -> str:
    return "#{:02x}{:02x}{:02x}".format(*color)


@dataclass(frozen=True)
class Palette:
    """Background fill and outline colours."""

    background: RGB = BLACK
    foreground: RGB = WHITE

    @classmethod
    def random(cls, rng: RandomSource) -> "Palette":
        """
        Dark background with a matching light outline.

        Draws one offset in [0, 32) per channel; the background sits that far
        above 10 and the foreground that far below 250.
        """
        offsets = [int(rng.random() * 32) for _ in range(3)]
        background = tuple(10 + o for o in offsets)
        foreground = tuple(250 - o for o in offsets)
        return cls(background=background, foreground=foreground)

    @property
    def hex_background(self) -> str:
        return _hex(self.background)

    @property
    def hex_foreground(self) -> str:
        return _hex(self.foreground)
