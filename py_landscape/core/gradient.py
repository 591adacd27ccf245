"""Local variation estimate for a height field."""

import numpy as np


def differentiate(heights: np.ndarray) -> np.ndarray:
    """
    Estimate local variation at every point of a height field.

    Each interior value is the mean of the differences between the west,
    north-west and north neighbours and the point itself. Only backward
    neighbours are used. Points on the ``x == 0`` or ``y == 0`` edges are 0.

    Args:
        heights: 2D height field indexed ``[x, y]``

    Returns:
        Array of the same shape holding the signed variation
    """
    h = np.asarray(heights, dtype=np.float64)
    if h.ndim != 2:
        raise ValueError(f"Height field must be 2D, got {h.ndim} dimensions")

    gradient = np.zeros_like(h)
    centre = h[1:, 1:]
    gradient[1:, 1:] = (
        (h[:-1, 1:] - centre) + (h[:-1, :-1] - centre) + (h[1:, :-1] - centre)
    ) / 3.0
    return gradient
