"""
Silhouette rendering of a height field.

Rows are drawn from the far edge of the grid to the near edge. Each row is a
polyline whose vertical position is its distance from the viewer plus the
scaled height. Before the outline is stroked, the area between the polyline
and the canvas floor is filled with the background colour, which paints over
any farther row that lies behind it. The water level clips the outline
stroke, so anything below it is never drawn.
"""

from typing import List, Optional, Tuple

import numpy as np
import structlog
from PIL import Image

from ..core.alea_prng import RandomSource
from ..utils.random import create_prng
from .canvas import clip, new_canvas
from .palette import Palette

logger = structlog.get_logger()

STROKE_WIDTH = 2


class SilhouetteRenderer:
    """
    Renders height fields as layered landscape outlines.

    Args:
        jitter: Shift every x coordinate by up to half a cell, hides the
            axis aligned seams left by the generator
        overscan: Extra rows drawn beyond both ends of a row slice
        palette: Background and outline colours
        rng: Random source for the jitter, a fresh one is created if needed
    """

    def __init__(
        self,
        jitter: bool = True,
        overscan: int = 0,
        palette: Optional[Palette] = None,
        rng: Optional[RandomSource] = None,
    ):
        if overscan < 0:
            raise ValueError(f"Overscan must not be negative, got {overscan}")
        self.jitter = jitter
        self.overscan = overscan
        self.palette = palette or Palette()
        self._rng = rng

    @property
    def rng(self) -> RandomSource:
        if self._rng is None:
            self._rng = create_prng()
        return self._rng

    def image(
        self,
        points: np.ndarray,
        scale: float,
        water: float,
        z: float,
        border: int,
        row_start: int = 0,
        row_end: Optional[int] = None,
    ) -> Image.Image:
        """
        Render rows ``row_start`` to ``row_end`` of a height field.

        Args:
            points: Height field indexed ``[x, y]``
            scale: Pixels per grid cell
            water: Water level, outlines below it are not drawn
            z: Vertical pixels per height unit
            border: Border width in pixels
            row_start: First row of the slice
            row_end: End of the slice (exclusive), defaults to all rows

        Returns:
            RGB image of ``int(scale * cols) + 2 * border`` by
            ``int(scale * (row_end - row_start)) + 2 * border`` pixels
        """
        points = np.asarray(points, dtype=np.float64)
        if points.ndim != 2 or points.shape[0] < 2:
            raise ValueError(
                f"Height field must be 2D with at least 2 columns, got shape {points.shape}"
            )
        if scale <= 0:
            raise ValueError(f"Scale must be positive, got {scale}")
        if border < 0:
            raise ValueError(f"Border must not be negative, got {border}")

        sx, rows = points.shape
        if row_end is None:
            row_end = rows
        if not 0 <= row_start < row_end <= rows:
            raise ValueError(
                f"Invalid row slice {row_start}:{row_end} for {rows} rows"
            )

        sy = row_end - row_start
        w = int(scale * sx) + 2 * border
        h = int(scale * sy) + 2 * border
        floor = border + int(scale * sy)
        image = new_canvas(w, h, self.palette.background)

        first = min(row_end - 1 + self.overscan, rows - 1)
        last = max(row_start - self.overscan, 0)

        for j in range(first, last - 1, -1):
            depth = border + int(scale * (row_end - j))
            line = self._project_row(points[:, j], scale, z, border, depth)

            # Close the outline along the floor so the fill hides farther rows
            x = line[-1][0]
            polygon = line + [(x, floor), (border, floor)]
            with clip(image, (0, 0, w, h - border)) as draw:
                draw.polygon(polygon, fill=self.palette.background)

            # Outline only, clipped at the water line
            cutoff = min(h - border, depth + int(z * water)) - 1
            if cutoff > 0:
                with clip(image, (0, 0, w, cutoff)) as draw:
                    draw.line(
                        line,
                        fill=self.palette.foreground,
                        width=STROKE_WIDTH,
                        joint="curve",
                    )

        logger.debug(
            "Rendered silhouette",
            width=w,
            height=h,
            rows=first - last + 1,
            jitter=self.jitter,
        )
        return image

    def _project_row(
        self, row: np.ndarray, scale: float, z: float, border: int, depth: int
    ) -> List[Tuple[int, int]]:
        line = []
        for i, p in enumerate(row):
            x = border + int(scale * i)
            y = depth + int(p * z)
            if self.jitter:
                x = int(x + (self.rng.random() - 0.5) * scale)
            line.append((x, y))
        return line
