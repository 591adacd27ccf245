#!/usr/bin/env python3
"""
Simple demo script showing landscape generation and rendering.
"""

import sys

import numpy as np

from py_landscape.core import differentiate, generate, smooth
from py_landscape.pipeline import LandscapeOptions, LandscapePipeline
from py_landscape.utils.random import create_prng


def main():
    """Demonstrate landscape generation."""
    seed = sys.argv[1] if len(sys.argv) > 1 else "demo123"
    print("Py-Landscape Generation Demo")
    print("=" * 40)

    # Effect of roughness on the generated terrain
    for roughness in (1.0, 2.0, 3.0):
        points = generate(roughness, 4, 3, 6, create_prng(seed))
        gradient = differentiate(points)
        smoothed = smooth(points, gradient, 0.8, 4)

        print(f"\nRoughness {roughness}:")
        print("-" * 30)
        print(f"  Grid: {points.shape[0]} x {points.shape[1]}")
        print(f"  Height range: {points.min():.3f} to {points.max():.3f}")
        print(f"  Mean |gradient| x 100: {np.abs(gradient).mean() * 100:.3f}")
        print(f"  Std before/after smoothing: {points.std():.4f} / {smoothed.std():.4f}")

    # Full pipeline with the extra images
    print("\n\nRendering landscape images...")
    options = LandscapeOptions(save_all=True, color=True)
    result = LandscapePipeline(options, create_prng(seed)).run()

    for name, image in (
        ("landscape.png", result.image),
        ("landscape-base.png", result.base_image),
        ("landscape-map.png", result.map_image),
    ):
        image.save(name)
        print(f"  Saved {name} ({image.width} x {image.height})")


if __name__ == "__main__":
    main()
