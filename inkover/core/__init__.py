"""
Core annotation model.

- stroke_model: Point, Stroke and the undoable StrokeHistory
- pointer_events: mouse/touch pointer variants
- coordinate_mapper: display-space to raster-space mapping
- base_image: host-supplied base raster
"""

from .stroke_model import Point, Stroke, StrokeHistory
from .pointer_events import MousePointer, TouchPointer, PointerEvent, client_position
from .coordinate_mapper import CoordinateMapper, map_to_raster
from .base_image import BaseImage, BaseImageError

__all__ = [
    'Point',
    'Stroke',
    'StrokeHistory',
    'MousePointer',
    'TouchPointer',
    'PointerEvent',
    'client_position',
    'CoordinateMapper',
    'map_to_raster',
    'BaseImage',
    'BaseImageError',
]
