"""
Core landscape generation functionality.
"""

from .alea_prng import AleaPRNG, RandomSource
from .heightfield import HeightFieldGenerator, GeneratorConfig, generate, interpolate, grid_size
from .gradient import differentiate
from .smoothing import smooth

__all__ = ['AleaPRNG', 'RandomSource', 'HeightFieldGenerator', 'GeneratorConfig',
           'generate', 'interpolate', 'grid_size', 'differentiate', 'smooth']
