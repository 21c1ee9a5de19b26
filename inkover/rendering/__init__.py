"""
Rendering subpackage.

- stroke_renderer: QPainter painting of individual strokes
- compositor: base image + stroke history compositing
"""

from .stroke_renderer import create_pen, build_stroke_path, stamp_dot, paint_stroke
from .compositor import composite_strokes, RasterCompositor

__all__ = [
    'create_pen',
    'build_stroke_path',
    'stamp_dot',
    'paint_stroke',
    'composite_strokes',
    'RasterCompositor',
]
