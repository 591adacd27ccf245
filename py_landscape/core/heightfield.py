"""
Height field generation by recursive midpoint displacement.

Each subdivision step doubles the resolution of the grid along both axes.
Existing points are copied through, the centre of every coarse cell gets the
average of its four corners plus a random offset, and the remaining edge
points average their two coarse neighbours with that centre. The offset
amplitude decays as ``level ** -roughness``, so a larger roughness exponent
gives smoother terrain.

Grids are NumPy arrays indexed ``[x, y]`` with shape ``(width, height)``.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np
import structlog

from .alea_prng import RandomSource

logger = structlog.get_logger()


def grid_size(n: int, iterations: int) -> int:
    """Size of one axis after ``iterations`` subdivision steps."""
    for _ in range(iterations):
        n = (n - 1) * 2 + 1
    return n


def _check_dimensions(width: int, height: int) -> None:
    if width < 2:
        raise ValueError(f"Grid width must be at least 2, got {width}")
    if height < 2:
        raise ValueError(f"Grid height must be at least 2, got {height}")


def interpolate(
    grid: np.ndarray, level: int, roughness: float, rng: RandomSource
) -> np.ndarray:
    """
    Run a single subdivision step over ``grid``.

    Args:
        grid: Input height field, left untouched
        level: 1-based subdivision level, sets the noise amplitude
        roughness: Amplitude decay exponent
        rng: Random source, one draw per cell centre

    Returns:
        New height field of shape ``((ix - 1) * 2 + 1, (iy - 1) * 2 + 1)``
    """
    g = np.asarray(grid, dtype=np.float64)
    ix, iy = g.shape
    _check_dimensions(ix, iy)
    amplitude = level ** -roughness
    output = np.zeros(((ix - 1) * 2 + 1, (iy - 1) * 2 + 1), dtype=np.float64)

    # Draw k belongs to centre k with x outer and y inner
    draws = np.array(
        [rng.random() for _ in range((ix - 1) * (iy - 1))], dtype=np.float64
    ).reshape(ix - 1, iy - 1)

    centre = (g[:-1, :-1] + g[:-1, 1:] + g[1:, :-1] + g[1:, 1:]) / 4.0
    centre = centre + (draws - 0.5) * amplitude

    # Edge midpoints on the boundary rows average the cell itself in place of a centre
    west_centre = g[1:, :].copy()
    west_centre[:, 1:] = centre
    north_centre = g[:, 1:].copy()
    north_centre[1:, :] = centre

    output[::2, ::2] = g
    output[1::2, 1::2] = centre
    output[1::2, ::2] = (g[1:, :] + g[:-1, :] + west_centre) / 3.0
    output[::2, 1::2] = (g[:, 1:] + g[:, :-1] + north_centre) / 3.0
    return output


def generate(
    roughness: float,
    width: int,
    height: int,
    iterations: int,
    rng: RandomSource,
) -> np.ndarray:
    """
    Generate a height field from a flat ``width`` x ``height`` grid.

    Raises:
        ValueError: if the grid is smaller than 2 x 2, iterations is
            negative or roughness is not positive
    """
    _check_dimensions(width, height)
    if iterations < 0:
        raise ValueError(f"Iterations must not be negative, got {iterations}")
    if roughness <= 0:
        raise ValueError(f"Roughness must be positive, got {roughness}")

    points = np.zeros((width, height), dtype=np.float64)
    for level in range(1, iterations + 1):
        points = interpolate(points, level, roughness, rng)

    logger.debug(
        "Generated height field",
        shape=points.shape,
        roughness=roughness,
        iterations=iterations,
    )
    return points


@dataclass
class GeneratorConfig:
    """Configuration for height field generation."""

    roughness: float = 2.0
    width: int = 4
    height: int = 3
    iterations: int = 6

    @property
    def shape(self):
        return (
            grid_size(self.width, self.iterations),
            grid_size(self.height, self.iterations),
        )


class HeightFieldGenerator:
    """Generates midpoint displacement height fields for a fixed configuration."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        self.config = config or GeneratorConfig()

    def generate(self, rng: RandomSource) -> np.ndarray:
        config = self.config
        return generate(
            config.roughness, config.width, config.height, config.iterations, rng
        )
