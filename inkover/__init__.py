"""
Inkover

Freehand stroke annotation over a base image, with undo, live
compositing and PNG export.
"""

__version__ = "1.0.0"

from .config import Config
from .core import BaseImage, BaseImageError, Point, Stroke, StrokeHistory
from .controllers import AnnotationSession
from .services import AnnotationResult, export_annotation

__all__ = [
    'Config',
    'BaseImage',
    'BaseImageError',
    'Point',
    'Stroke',
    'StrokeHistory',
    'AnnotationSession',
    'AnnotationResult',
    'export_annotation',
]
