"""
Stroke model for freehand annotations.

Holds the ordered stroke history (insertion order is z-order) and the
single in-progress stroke. All coordinates are raster-intrinsic pixels.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..config import Config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Point:
    """A point in raster-intrinsic pixel space."""

    x: float
    y: float


@dataclass
class Stroke:
    """One continuous freehand mark."""

    points: List[Point] = field(default_factory=list)
    color: str = Config.DEFAULT_COLOR
    brush_width: float = float(Config.DEFAULT_BRUSH_WIDTH)

    @property
    def is_dot(self) -> bool:
        """True when every point coincides (a tap without drag)."""
        first = self.points[0]
        return all(p == first for p in self.points[1:])


class StrokeHistory:
    """
    Append-only stroke history with undo and clear.

    Only the most recent stroke can be active; it gains trailing points
    while the pointer is down. Every mutation completes before returning,
    so readers never see a stroke with zero points.
    """

    def __init__(self):
        self._strokes: List[Stroke] = []
        self._active: Optional[Stroke] = None

    # ==================== Read Access ====================

    @property
    def strokes(self) -> Tuple[Stroke, ...]:
        """Snapshot of the history in z-order."""
        return tuple(self._strokes)

    @property
    def active_stroke(self) -> Optional[Stroke]:
        return self._active

    @property
    def is_empty(self) -> bool:
        return not self._strokes

    def __len__(self) -> int:
        return len(self._strokes)

    def __bool__(self) -> bool:
        return bool(self._strokes)

    def __iter__(self):
        return iter(tuple(self._strokes))

    # ==================== Mutations ====================

    def begin_stroke(self, point: Point, color: str, brush_width: float) -> Stroke:
        """
        Append a new single-point stroke and make it active.

        Args:
            point: First point, in raster space
            color: Stroke color as '#rrggbb'
            brush_width: Stroke width in raster pixels (must be positive)

        Returns:
            The new active stroke
        """
        if brush_width <= 0:
            raise ValueError(f"Brush width must be positive, got {brush_width}")

        if self._active is not None:
            self.end_active_stroke()

        stroke = Stroke(points=[point], color=color, brush_width=float(brush_width))
        self._strokes.append(stroke)
        self._active = stroke
        return stroke

    def extend_active_stroke(self, point: Point) -> bool:
        """Append a point to the active stroke. Returns False if none is active."""
        if self._active is None:
            logger.debug("extend_active_stroke ignored: no active stroke")
            return False
        self._active.points.append(point)
        return True

    def end_active_stroke(self) -> Optional[Stroke]:
        """Deactivate the current stroke; it stays in history."""
        stroke = self._active
        if stroke is None:
            logger.debug("end_active_stroke ignored: no active stroke")
            return None
        self._active = None
        return stroke

    def undo(self) -> Optional[Stroke]:
        """Remove the most recent stroke. No-op on an empty history."""
        if not self._strokes:
            return None
        removed = self._strokes.pop()
        if removed is self._active:
            self._active = None
        return removed

    def clear(self):
        """Remove every stroke."""
        self._strokes.clear()
        self._active = None


__all__ = ['Point', 'Stroke', 'StrokeHistory']
