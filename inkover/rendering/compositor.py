"""
Raster compositor.

Renders the base image plus every stroke, in history order, onto a buffer
the size of the base image. Each call is a full redraw.
"""

import logging
from typing import Iterable, Optional

from PyQt6.QtGui import QImage, QPainter

from ..core.stroke_model import Stroke
from .stroke_renderer import paint_stroke

logger = logging.getLogger(__name__)


def composite_strokes(base: QImage, strokes: Iterable[Stroke]) -> QImage:
    """
    Composite strokes over a base image.

    Args:
        base: Base raster (never modified)
        strokes: Strokes in z-order (earlier strokes painted first)

    Returns:
        New ARGB32 image with the same intrinsic size as base
    """
    # copy() detaches from the caller's image even when no conversion happens
    result = base.convertToFormat(QImage.Format.Format_ARGB32).copy()

    strokes = list(strokes)
    if not strokes:
        return result

    painter = QPainter(result)
    try:
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        for stroke in strokes:
            paint_stroke(painter, stroke)
    finally:
        painter.end()

    return result


class RasterCompositor:
    """
    Owns the base raster and the last composite buffer shown on screen.

    The buffer is derived state only; export never reads it (see
    services.export_gate).
    """

    def __init__(self):
        self._base: Optional[QImage] = None
        self._buffer: Optional[QImage] = None

    @property
    def base(self) -> Optional[QImage]:
        return self._base

    @property
    def buffer(self) -> Optional[QImage]:
        """The most recent composite, or None before a base image is set."""
        return self._buffer

    def set_base(self, base: Optional[QImage]):
        """Replace the base raster and drop the cached composite."""
        self._base = base
        self._buffer = QImage(base) if base is not None else None

    def recomposite(self, strokes: Iterable[Stroke]) -> Optional[QImage]:
        """Redraw the buffer from the base image and the given strokes."""
        if self._base is None:
            return None
        self._buffer = composite_strokes(self._base, strokes)
        return self._buffer


__all__ = ['composite_strokes', 'RasterCompositor']
