"""
Top-down shaded map of the submerged parts of a landscape.

Only points below the water level are painted. Calm water, where the scaled
gradient is under the threshold, is tinted blue-green and rough relief is
shown in grey, both with brightness proportional to the gradient.
"""

from typing import Optional

import numpy as np
import structlog
from PIL import Image

from .canvas import clip, new_canvas
from .palette import Palette, RGB

logger = structlog.get_logger()


def shade(gradient: float, threshold: float) -> RGB:
    """Colour for a submerged point with the given gradient."""
    q = abs(gradient * 100.0)
    c = min(255, int(q * 255.0 + 0.5))
    if q < threshold:
        return (0, c, c // 2)
    return (c, c, c)


class ShadedMapRenderer:
    """Plots a height field and its gradient as a shaded map."""

    def __init__(self, palette: Optional[Palette] = None):
        self.palette = palette or Palette()

    def plot(
        self,
        points: np.ndarray,
        gradient: np.ndarray,
        scale: float,
        water: float,
        threshold: float,
    ) -> Image.Image:
        """
        Plot each submerged point as a disc clipped to its own cell.

        Args:
            points: Height field indexed ``[x, y]``
            gradient: Variation field with the same shape
            scale: Pixels per cell, truncated to an integer
            water: Only points strictly below this level are drawn
            threshold: Gradient threshold between calm and rough colouring

        Returns:
            RGB image of ``int(scale) * cols`` by ``int(scale) * rows`` pixels
        """
        points = np.asarray(points, dtype=np.float64)
        gradient = np.asarray(gradient, dtype=np.float64)
        if points.ndim != 2:
            raise ValueError(f"Height field must be 2D, got {points.ndim} dimensions")
        if points.shape != gradient.shape:
            raise ValueError(
                f"Gradient shape {gradient.shape} does not match height field shape {points.shape}"
            )

        s = int(scale)
        if s < 1:
            raise ValueError(f"Scale must be at least 1, got {scale}")

        sx, sy = points.shape
        image = new_canvas(s * sx, s * sy, self.palette.background)

        painted = 0
        for j in range(sy):
            # North at the top
            y = s * (sy - 1 - j)
            for i in range(sx):
                if not points[i, j] < water:
                    continue
                x = s * i
                with clip(image, (x, y, x + s, y + s)) as draw:
                    # Disc of radius 1.5 cells centred on the cell
                    draw.ellipse(
                        (-s, -s, 2 * s, 2 * s),
                        fill=shade(gradient[i, j], threshold),
                    )
                painted += 1

        logger.debug(
            "Plotted shaded map",
            width=image.width,
            height=image.height,
            submerged=painted,
        )
        return image
