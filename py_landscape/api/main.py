"""FastAPI main application."""

import io
from typing import List, Optional, Tuple

import structlog
from fastapi import FastAPI, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel, Field

from .. import __version__
from ..config import settings
from ..core.gradient import differentiate
from ..core.heightfield import generate, grid_size
from ..core.smoothing import smooth
from ..render.palette import Palette
from ..render.shaded_map import ShadedMapRenderer
from ..render.silhouette import SilhouetteRenderer
from ..utils.log import configure_logging
from ..utils.random import create_prng, new_seed

configure_logging(settings.log_level, settings.log_format)

logger = structlog.get_logger()

app = FastAPI(
    title="Fractal Landscape API",
    description="Midpoint displacement landscapes rendered as silhouettes and shaded maps",
    version=__version__,
)


# Request/Response models
class HeightFieldRequest(BaseModel):
    """Request to generate a height field."""

    seed: Optional[str] = Field(None, description="Random seed for reproducible generation")
    roughness: float = Field(2.0, gt=0, description="Noise decay exponent")
    width: int = Field(4, ge=2, le=64, description="Initial grid width")
    height: int = Field(3, ge=2, le=64, description="Initial grid height")
    iterations: int = Field(6, ge=0, description="Subdivision steps")
    filter_iterations: int = Field(4, ge=0, le=100, description="Extra smoothing passes")
    threshold: float = Field(0.8, description="Smoothing gradient threshold")


class HeightFieldResponse(BaseModel):
    """Generated height field."""

    seed: str
    roughness: float
    shape: List[int]
    heights: List[List[float]]
    gradient: Optional[List[List[float]]] = None


class HeightFieldQuery(HeightFieldRequest):
    include_gradient: bool = Field(False, description="Also return the gradient field")
    smoothed: bool = Field(False, description="Return the smoothed heights")


class RenderRequest(HeightFieldRequest):
    """Request to render a landscape image."""

    style: str = Field("silhouette", pattern="^(silhouette|map)$", description="silhouette or map")
    water: float = Field(0.3, description="Water level")
    scale: float = Field(4.0, gt=0, le=32, description="Pixels per grid cell")
    z: float = Field(200.0, description="Vertical pixels per height unit")
    border: int = Field(0, ge=0, le=512, description="Border width in pixels")
    jitter: bool = Field(True, description="Jitter x coordinates")
    color: bool = Field(False, description="Random colour scheme")


def _resolve_seed(seed: Optional[str]) -> str:
    if seed:
        return seed
    if settings.seed is not None:
        return str(settings.seed)
    return new_seed()


def _check_iterations(iterations: int) -> None:
    if iterations > settings.max_iterations:
        raise HTTPException(
            status_code=400,
            detail=f"iterations must be at most {settings.max_iterations}",
        )


def _check_points(request: HeightFieldRequest) -> Tuple[int, int]:
    """Reject requests whose height field would exceed ``max_points``."""
    _check_iterations(request.iterations)
    shape = (
        grid_size(request.width, request.iterations),
        grid_size(request.height, request.iterations),
    )
    if shape[0] * shape[1] > settings.max_points:
        raise HTTPException(
            status_code=400,
            detail=f"Height field of {shape[0]} x {shape[1]} points exceeds {settings.max_points}",
        )
    return shape


def _check_pixels(request: RenderRequest, shape: Tuple[int, int]) -> None:
    """Reject renders whose canvas would exceed ``max_pixels``."""
    cols, rows = shape
    if request.style == "map":
        s = int(request.scale)
        pixels = s * cols * s * rows
    else:
        border = 2 * request.border
        pixels = (int(request.scale * cols) + border) * (int(request.scale * rows) + border)
    if pixels > settings.max_pixels:
        raise HTTPException(
            status_code=400,
            detail=f"Image of {pixels} pixels exceeds {settings.max_pixels}",
        )


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Fractal Landscape API",
        "version": __version__,
        "status": "running",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post("/landscapes/heightfield", response_model=HeightFieldResponse)
def create_heightfield(request: HeightFieldQuery):
    """Generate a height field and return it as nested lists indexed [x][y]."""
    logger.info("Height field requested", request=request.model_dump())
    _check_points(request)

    seed = _resolve_seed(request.seed)
    try:
        points = generate(
            request.roughness, request.width, request.height, request.iterations, create_prng(seed)
        )
        gradient = differentiate(points)
        if request.smoothed:
            points = smooth(points, gradient, request.threshold, request.filter_iterations)
    except ValueError as e:
        logger.warning("Height field generation rejected", error=str(e))
        raise HTTPException(status_code=400, detail=str(e))

    return HeightFieldResponse(
        seed=seed,
        roughness=request.roughness,
        shape=list(points.shape),
        heights=points.tolist(),
        gradient=gradient.tolist() if request.include_gradient else None,
    )


@app.post("/landscapes/render")
def render_landscape(request: RenderRequest):
    """Generate, smooth and render a landscape as an encoded image."""
    logger.info("Render requested", request=request.model_dump())
    _check_pixels(request, _check_points(request))

    seed = _resolve_seed(request.seed)
    rng = create_prng(seed)
    try:
        points = generate(
            request.roughness, request.width, request.height, request.iterations, rng
        )
        gradient = differentiate(points)
        palette = Palette.random(rng) if request.color else Palette()

        if request.style == "map":
            image = ShadedMapRenderer(palette).plot(
                points, gradient, request.scale, request.water, request.threshold
            )
        else:
            smoothed = smooth(points, gradient, request.threshold, request.filter_iterations)
            renderer = SilhouetteRenderer(jitter=request.jitter, palette=palette, rng=rng)
            image = renderer.image(
                smoothed, request.scale, request.water, request.z, request.border
            )
    except ValueError as e:
        logger.warning("Render rejected", error=str(e))
        raise HTTPException(status_code=400, detail=str(e))

    buffer = io.BytesIO()
    image.save(buffer, format=settings.image_format)
    logger.info(
        "Rendered landscape",
        seed=seed,
        style=request.style,
        width=image.width,
        height=image.height,
    )
    return Response(
        content=buffer.getvalue(),
        media_type=settings.media_type,
        headers={"X-Landscape-Seed": seed},
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
