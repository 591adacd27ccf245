"""
Fractal landscape generation and rendering.
"""

__version__ = "0.5.0"
