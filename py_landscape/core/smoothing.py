"""
Gradient gated smoothing of a height field.

Points whose scaled variation is under the threshold are replaced by the mean
of themselves and their west, north-west and north neighbours. The gate is
the gradient supplied by the caller and stays the same for every pass.
"""

import numpy as np
import structlog

logger = structlog.get_logger()


def _filter(heights: np.ndarray, calm: np.ndarray) -> np.ndarray:
    output = heights.copy()
    centre = heights[1:, 1:]
    average = (heights[:-1, 1:] + heights[:-1, :-1] + heights[1:, :-1] + centre) / 4.0
    output[1:, 1:] = np.where(calm, average, centre)
    return output


def smooth(
    heights: np.ndarray,
    gradient: np.ndarray,
    threshold: float,
    iterations: int,
) -> np.ndarray:
    """
    Smooth a height field where the gradient is below a threshold.

    Runs ``iterations + 1`` filter passes, so ``iterations=0`` still filters
    once. Edge points with ``x == 0`` or ``y == 0`` are never changed.

    Args:
        heights: Height field, left untouched
        gradient: Variation field from ``differentiate`` with the same shape
        threshold: Points with ``abs(gradient * 100) < threshold`` are smoothed
        iterations: Number of extra passes

    Returns:
        New smoothed height field
    """
    h = np.array(heights, dtype=np.float64)
    g = np.asarray(gradient, dtype=np.float64)
    if h.ndim != 2:
        raise ValueError(f"Height field must be 2D, got {h.ndim} dimensions")
    if h.shape != g.shape:
        raise ValueError(
            f"Gradient shape {g.shape} does not match height field shape {h.shape}"
        )
    if iterations < 0:
        raise ValueError(f"Iterations must not be negative, got {iterations}")

    calm = np.abs(g[1:, 1:] * 100.0) < threshold
    logger.debug(
        "Smoothing height field",
        passes=iterations + 1,
        threshold=threshold,
        calm_points=int(np.count_nonzero(calm)),
    )

    for _ in range(iterations + 1):
        h = _filter(h, calm)
    return h
