"""
Landscape image pipeline.

Generates a height field, differentiates it, smooths it and renders the
result, logging each stage. The intermediate fields are returned along with
the images so callers can save or inspect whichever they need.
"""

from dataclasses import dataclass
from typing import List, Optional

import numpy as np
import structlog
from PIL import Image
from pydantic import BaseModel, Field

from .core.alea_prng import RandomSource
from .core.gradient import differentiate
from .core.heightfield import GeneratorConfig, HeightFieldGenerator
from .core.smoothing import smooth
from .render.palette import Palette
from .render.shaded_map import ShadedMapRenderer
from .render.silhouette import SilhouetteRenderer
from .utils.random import create_prng

logger = structlog.get_logger()


class LandscapeOptions(BaseModel):
    """Options for a landscape pipeline run."""

    generator_iterations: int = Field(default=6, ge=0, description="Subdivision steps")
    roughness: Optional[float] = Field(
        default=None, gt=0, description="Noise decay exponent, random in [2, 2.25) when unset"
    )
    filter_iterations: int = Field(default=4, ge=0, description="Extra smoothing passes")
    threshold: float = Field(default=0.8, description="Smoothing gradient threshold")
    width: int = Field(default=4, ge=2, description="Initial grid width")
    height: int = Field(default=3, ge=2, description="Initial grid height")
    water: Optional[float] = Field(
        default=None, description="Water level, random in (-0.2, 0.8] when unset"
    )
    scale: float = Field(default=12.0, gt=0, description="Pixels per grid cell")
    z: float = Field(default=600.0, description="Vertical pixels per height unit")
    border: int = Field(default=0, ge=0, description="Border width in pixels")
    color: bool = Field(default=False, description="Pick a random colour scheme per landscape")
    save_all: bool = Field(default=False, description="Also render the unfiltered landscape and map")
    jitter: bool = Field(default=True, description="Jitter x coordinates when rendering")
    overscan: int = Field(default=0, ge=0, description="Extra rows drawn beyond the slice")


@dataclass
class LandscapeResult:
    """Everything produced by one pipeline run."""

    heights: np.ndarray
    gradient: np.ndarray
    smoothed: np.ndarray
    image: Image.Image
    palette: Palette
    roughness: float
    water: float
    base_image: Optional[Image.Image] = None
    map_image: Optional[Image.Image] = None


class LandscapePipeline:
    """
    Runs generate, differentiate, smooth and render with one random stream.

    Unset roughness and water level are drawn from the stream once, when the
    pipeline is created, and shared by every landscape it produces.
    """

    def __init__(
        self,
        options: Optional[LandscapeOptions] = None,
        rng: Optional[RandomSource] = None,
    ):
        self.options = options or LandscapeOptions()
        self.rng = rng if rng is not None else create_prng()

        opts = self.options
        self.roughness = (
            opts.roughness if opts.roughness is not None else 2.0 + self.rng.random() / 4.0
        )
        self.water = opts.water if opts.water is not None else 0.8 - self.rng.random()

        self.generator = HeightFieldGenerator(
            GeneratorConfig(
                roughness=self.roughness,
                width=opts.width,
                height=opts.height,
                iterations=opts.generator_iterations,
            )
        )
        self.renderer = SilhouetteRenderer(
            jitter=opts.jitter, overscan=opts.overscan, rng=self.rng
        )
        self.plotter = ShadedMapRenderer()

    def run(self) -> LandscapeResult:
        """Generate and render a single landscape."""
        opts = self.options
        log = logger.bind(roughness=round(self.roughness, 3), water=round(self.water, 3))

        palette = Palette.random(self.rng) if opts.color else Palette()
        self.renderer.palette = palette
        self.plotter.palette = palette
        if opts.color:
            log.info("Setting landscape colour", background=palette.hex_background)

        log.info("Generating landscape", iterations=opts.generator_iterations)
        points = self.generator.generate(self.rng)
        log.info("Generated points", count=points.size, shape=points.shape)

        base_image = None
        if opts.save_all:
            base_image = self.renderer.image(points, opts.scale, self.water, opts.z, opts.border)
            log.info("Rendered base image", width=base_image.width, height=base_image.height)

        log.info("Differentiating points")
        gradient = differentiate(points)

        map_image = None
        if opts.save_all:
            map_image = self.plotter.plot(
                points, gradient, opts.scale / 2, self.water, opts.threshold
            )
            log.info("Plotted map", width=map_image.width, height=map_image.height)

        log.info(
            "Filtering points",
            iterations=opts.filter_iterations,
            threshold=opts.threshold,
        )
        smoothed = smooth(points, gradient, opts.threshold, opts.filter_iterations)
        image = self.renderer.image(smoothed, opts.scale, self.water, opts.z, opts.border)
        log.info("Rendered image", width=image.width, height=image.height)

        return LandscapeResult(
            heights=points,
            gradient=gradient,
            smoothed=smoothed,
            image=image,
            palette=palette,
            roughness=self.roughness,
            water=self.water,
            base_image=base_image,
            map_image=map_image,
        )

    def run_many(self, n: int) -> List[LandscapeResult]:
        """Generate ``n`` landscapes from the same stream."""
        if n < 1:
            raise ValueError(f"Landscape count must be at least 1, got {n}")
        logger.info("Running landscape pipeline", count=n)
        return [self.run() for _ in range(n)]
