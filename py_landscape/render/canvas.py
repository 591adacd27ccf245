"""Raster canvas helpers shared by the renderers."""

from contextlib import contextmanager
from typing import Iterator, Tuple

from PIL import Image, ImageDraw

from .palette import RGB

Box = Tuple[int, int, int, int]


def new_canvas(width: int, height: int, background: RGB) -> Image.Image:
    """Create a cleared 24-bit RGB image."""
    if width <= 0 or height <= 0:
        raise ValueError(f"Canvas size must be positive, got {width} x {height}")
    return Image.new("RGB", (width, height), background)


@contextmanager
def clip(image: Image.Image, box: Box) -> Iterator[ImageDraw.ImageDraw]:
    """
    Draw into ``image`` with everything outside ``box`` discarded.

    The yielded drawing context uses coordinates relative to the top left
    corner of ``box``. The clipped region is written back on exit.
    """
    left, top, right, bottom = box
    if (left, top, right, bottom) == (0, 0, image.width, image.height):
        yield ImageDraw.Draw(image)
        return

    region = image.crop(box)
    yield ImageDraw.Draw(region)
    image.paste(region, (left, top))
