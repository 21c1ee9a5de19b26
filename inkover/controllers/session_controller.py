"""
AnnotationSession - Input session controller for stroke annotation

Turns pointer events into stroke lifecycle transitions, keeps the display
composite current and publishes the export result after every stroke end,
undo and clear.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from PyQt6.QtCore import QObject, QRectF, QSize, pyqtSignal
from PyQt6.QtGui import QImage

from ..config import Config
from ..core.base_image import BaseImage
from ..core.coordinate_mapper import CoordinateMapper
from ..core.pointer_events import PointerEvent
from ..core.stroke_model import StrokeHistory
from ..rendering.compositor import RasterCompositor
from ..services.export_gate import AnnotationResult, export_annotation

logger = logging.getLogger(__name__)


@dataclass
class SessionState:
    """Per-session drawing state."""

    is_drawing: bool = False
    color: str = Config.DEFAULT_COLOR
    brush_width: int = Config.DEFAULT_BRUSH_WIDTH


class AnnotationSession(QObject):
    """
    Owns the stroke history for one base image.

    States:
    - Idle: pointer_down begins a stroke
    - Drawing: pointer_move extends it, pointer_up/pointer_leave end it

    This is the only writer of the stroke history. Rendering and export
    are pure functions of (base image, history).
    """

    # Signals
    composite_updated = pyqtSignal(QImage)      # fresh display buffer
    annotation_changed = pyqtSignal(object)     # AnnotationResult or None
    history_changed = pyqtSignal(int)           # stroke count
    base_image_changed = pyqtSignal()
    drawing_started = pyqtSignal()
    drawing_finished = pyqtSignal()

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)

        self._history = StrokeHistory()
        self._mapper = CoordinateMapper()
        self._compositor = RasterCompositor()
        self._state = SessionState()
        self._base_image: Optional[BaseImage] = None

    # ==================== Properties ====================

    @property
    def history(self) -> StrokeHistory:
        """Read access to the stroke history. Mutate only through this class."""
        return self._history

    @property
    def state(self) -> SessionState:
        return SessionState(
            is_drawing=self._state.is_drawing,
            color=self._state.color,
            brush_width=self._state.brush_width
        )

    @property
    def is_drawing(self) -> bool:
        return self._state.is_drawing

    @property
    def color(self) -> str:
        return self._state.color

    @property
    def brush_width(self) -> int:
        return self._state.brush_width

    @property
    def base_image(self) -> Optional[BaseImage]:
        return self._base_image

    @property
    def intrinsic_size(self) -> QSize:
        """Raster size of the loaded base image (0x0 before loading)."""
        return self._mapper.intrinsic_size

    @property
    def composite(self) -> Optional[QImage]:
        """Current display composite."""
        return self._compositor.buffer

    # ==================== Configuration ====================

    def set_color(self, color: str):
        """Select a palette color for subsequent strokes."""
        normalized = color.lower()
        if normalized not in Config.palette_colors():
            raise ValueError(f"Color {color!r} is not in the palette")
        self._state.color = normalized

    def set_brush_width(self, width: int):
        """Select a configured brush width for subsequent strokes."""
        if width not in Config.brush_widths():
            raise ValueError(
                f"Brush width {width!r} is not one of {Config.brush_widths()}"
            )
        self._state.brush_width = int(width)

    # ==================== Base Image ====================

    def load_base_image(self, base_image: BaseImage):
        """
        Start a new session on a base image.

        Resets the history, the in-progress stroke, drawing state and the
        cached composite, then announces that there is no annotation.

        Raises:
            BaseImageError: if the image cannot be decoded (session unchanged)
        """
        raster = base_image.to_qimage()

        self._base_image = base_image
        self._history.clear()
        self._state = SessionState()
        self._mapper.set_intrinsic_size(raster.width(), raster.height())
        self._compositor.set_base(raster)

        logger.info(f"Base image loaded: {raster.width()}x{raster.height()} ({base_image.mime_type})")

        self.base_image_changed.emit()
        self.history_changed.emit(0)
        self.composite_updated.emit(self._compositor.buffer)
        self.annotation_changed.emit(None)

    # ==================== Pointer Input ====================

    def pointer_down(self, event: PointerEvent, surface_rect: QRectF) -> bool:
        """
        Begin a stroke (Idle -> Drawing).

        Args:
            event: Mouse or touch pointer event
            surface_rect: Current on-screen rect of the displayed raster

        Returns:
            True if a stroke was started
        """
        if self._state.is_drawing:
            logger.debug("pointer_down ignored: already drawing")
            return False

        point = self._mapper.map_event(event, surface_rect)
        if point is None:
            return False

        self._history.begin_stroke(point, self._state.color, self._state.brush_width)
        self._state.is_drawing = True
        self.drawing_started.emit()
        self._refresh_composite()
        self.history_changed.emit(len(self._history))
        return True

    def pointer_move(self, event: PointerEvent, surface_rect: QRectF) -> bool:
        """Extend the active stroke. Ignored while Idle."""
        if not self._state.is_drawing:
            return False

        point = self._mapper.map_event(event, surface_rect)
        if point is None:
            return False

        if not self._history.extend_active_stroke(point):
            return False
        self._refresh_composite()
        return True

    def pointer_up(self) -> bool:
        """End the active stroke (Drawing -> Idle) and publish the export."""
        if not self._state.is_drawing:
            return False

        self._history.end_active_stroke()
        self._state.is_drawing = False
        self.drawing_finished.emit()
        self._refresh_composite()
        self._publish()
        return True

    def pointer_leave(self) -> bool:
        """Pointer left the surface; same as pointer_up while drawing."""
        return self.pointer_up()

    # ==================== Commands ====================

    def undo(self):
        """Remove the most recent stroke and publish the export."""
        removed = self._history.undo()
        if removed is not None:
            logger.debug(f"Undo: {len(self._history)} stroke(s) remain")
        self._sync_drawing_state()
        self._refresh_composite()
        self.history_changed.emit(len(self._history))
        self._publish()

    def clear(self):
        """Remove all strokes and publish the export."""
        self._history.clear()
        self._sync_drawing_state()
        self._refresh_composite()
        self.history_changed.emit(0)
        self._publish()

    def export(self) -> Optional[AnnotationResult]:
        """
        Flatten the current history over the base image.

        Always recomposites from the history as it is now.

        Returns:
            AnnotationResult, or None when there are no strokes
        """
        return export_annotation(self._compositor.base, self._history.strokes)

    # ==================== Internal ====================

    def _sync_drawing_state(self):
        """Return to Idle if the active stroke was removed."""
        if self._state.is_drawing and self._history.active_stroke is None:
            self._state.is_drawing = False
            self.drawing_finished.emit()

    def _refresh_composite(self):
        buffer = self._compositor.recomposite(self._history.strokes)
        if buffer is not None:
            self.composite_updated.emit(buffer)

    def _publish(self):
        result = self.export()
        self.annotation_changed.emit(result)


__all__ = ['AnnotationSession', 'SessionState']
