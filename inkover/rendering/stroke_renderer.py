"""
Stroke renderer for painting strokes onto a raster.

Provides functions to turn Stroke data into QPainter paths and paint
them with round caps and joins.
"""

from typing import Sequence

from PyQt6.QtCore import Qt, QPointF
from PyQt6.QtGui import QPen, QBrush, QColor, QPainter, QPainterPath

from ..core.stroke_model import Point, Stroke


def create_pen(stroke: Stroke) -> QPen:
    """Create a round-capped, round-joined pen for the stroke's color and width."""
    pen = QPen(QColor(stroke.color), stroke.brush_width)
    pen.setCapStyle(Qt.PenCapStyle.RoundCap)
    pen.setJoinStyle(Qt.PenJoinStyle.RoundJoin)
    return pen


def build_stroke_path(points: Sequence[Point]) -> QPainterPath:
    """
    Build a connected polyline path through the points.

    Args:
        points: Points in raster space (at least one)

    Returns:
        QPainterPath starting at the first point
    """
    path = QPainterPath()
    path.moveTo(points[0].x, points[0].y)
    for point in points[1:]:
        path.lineTo(point.x, point.y)
    return path


def stamp_dot(painter: QPainter, center: Point, diameter: float, color: QColor):
    """Stamp a filled circle of the given diameter."""
    radius = diameter / 2.0
    painter.setPen(QPen(Qt.PenStyle.NoPen))
    painter.setBrush(QBrush(color))
    painter.drawEllipse(QPointF(center.x, center.y), radius, radius)


def paint_stroke(painter: QPainter, stroke: Stroke):
    """
    Paint one stroke.

    A stroke whose points all coincide (a tap) is stamped as a dot of
    diameter brush_width; anything longer is stroked as a path.
    """
    if not stroke.points:
        return

    if stroke.is_dot:
        stamp_dot(painter, stroke.points[0], stroke.brush_width, QColor(stroke.color))
        return

    painter.setPen(create_pen(stroke))
    painter.setBrush(Qt.BrushStyle.NoBrush)
    painter.drawPath(build_stroke_path(stroke.points))


__all__ = [
    'create_pen',
    'build_stroke_path',
    'stamp_dot',
    'paint_stroke',
]
