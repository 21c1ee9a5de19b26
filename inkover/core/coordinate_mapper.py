"""
Coordinate mapping for the annotation surface.

Converts pointer positions in display-surface space to raster-intrinsic
pixel coordinates. The surface may be displayed at any size, so the
mapping is computed from the current geometry on every event.
"""

import logging
from typing import Optional

from PyQt6.QtCore import QPointF, QRectF, QSize

from .pointer_events import PointerEvent, client_position
from .stroke_model import Point

logger = logging.getLogger(__name__)


def map_to_raster(
    client_pos: QPointF,
    surface_rect: QRectF,
    intrinsic_width: int,
    intrinsic_height: int
) -> Optional[Point]:
    """
    Map a client-space position to raster space.

    Args:
        client_pos: Pointer position in client coordinates
        surface_rect: On-screen rect of the displayed surface (its size is
            the displayed size)
        intrinsic_width: Raster width in pixels
        intrinsic_height: Raster height in pixels

    Returns:
        Point in raster space, or None if the surface is not sized yet
    """
    if intrinsic_width <= 0 or intrinsic_height <= 0:
        return None
    if surface_rect.width() <= 0 or surface_rect.height() <= 0:
        return None

    x = (client_pos.x() - surface_rect.left()) * (intrinsic_width / surface_rect.width())
    y = (client_pos.y() - surface_rect.top()) * (intrinsic_height / surface_rect.height())
    return Point(x, y)


class CoordinateMapper:
    """
    Maps pointer events onto the raster buffer.

    Holds only the intrinsic raster size; the displayed geometry is passed
    with every event because it can change between events.
    """

    def __init__(self):
        self._intrinsic_size = QSize(0, 0)

    def set_intrinsic_size(self, width: int, height: int):
        """Set the raster size (called when a base image is loaded)."""
        self._intrinsic_size = QSize(max(0, width), max(0, height))

    def reset(self):
        """Forget the raster size; mapping fails until it is set again."""
        self._intrinsic_size = QSize(0, 0)

    @property
    def intrinsic_size(self) -> QSize:
        return QSize(self._intrinsic_size)

    def is_ready(self) -> bool:
        """True once the raster has non-zero intrinsic dimensions."""
        return self._intrinsic_size.width() > 0 and self._intrinsic_size.height() > 0

    def map_event(self, event: PointerEvent, surface_rect: QRectF) -> Optional[Point]:
        """
        Map a pointer event to raster space.

        Args:
            event: Mouse or touch pointer event
            surface_rect: Current on-screen rect of the displayed surface

        Returns:
            Point in raster space, or None when the surface is unready or
            the event carries no touch points
        """
        if not self.is_ready():
            logger.debug("Pointer event dropped: surface not sized")
            return None

        pos = client_position(event)
        if pos is None:
            logger.debug("Pointer event dropped: no active touch points")
            return None

        return map_to_raster(
            pos,
            surface_rect,
            self._intrinsic_size.width(),
            self._intrinsic_size.height()
        )


__all__ = ['CoordinateMapper', 'map_to_raster']
