"""
Pointer event variants accepted at the input boundary.

Mouse and touch input are tagged variants; both normalize to a single
client-space position before coordinate mapping.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from PyQt6.QtCore import QPointF


@dataclass(frozen=True)
class MousePointer:
    """Single-point pointer (mouse, pen acting as mouse)."""

    client_x: float
    client_y: float


@dataclass(frozen=True)
class TouchPointer:
    """Touch input carrying zero or more active touch points."""

    touches: Tuple[Tuple[float, float], ...] = ()


PointerEvent = Union[MousePointer, TouchPointer]


def client_position(event: PointerEvent) -> Optional[QPointF]:
    """
    Normalize a pointer event to its client-space position.

    Touch events use the first active touch.

    Returns:
        QPointF, or None for a touch event with no touch points
    """
    if isinstance(event, MousePointer):
        return QPointF(event.client_x, event.client_y)
    if isinstance(event, TouchPointer):
        if not event.touches:
            return None
        x, y = event.touches[0]
        return QPointF(x, y)
    raise TypeError(f"Unsupported pointer event: {type(event).__name__}")


__all__ = ['MousePointer', 'TouchPointer', 'PointerEvent', 'client_position']
