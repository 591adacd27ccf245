"""
Landscape rendering.
"""

from .palette import Palette
from .silhouette import SilhouetteRenderer
from .shaded_map import ShadedMapRenderer

__all__ = ['Palette', 'SilhouetteRenderer', 'ShadedMapRenderer']
