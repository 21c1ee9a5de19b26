"""
AnnotationCanvas - Widget surface for drawing over a base image

Displays the session composite scaled to fit the widget (aspect ratio
kept, centered) and forwards mouse and touch input to the session as
pointer events in widget coordinates.
"""

import logging
from typing import Optional

from PyQt6.QtWidgets import QWidget, QSizePolicy
from PyQt6.QtCore import Qt, QEvent, QPointF, QRectF, QSizeF
from PyQt6.QtGui import QPainter, QColor, QImage, QCursor, QEventPoint

from ..controllers.session_controller import AnnotationSession
from ..core.pointer_events import MousePointer, TouchPointer

logger = logging.getLogger(__name__)


class AnnotationCanvas(QWidget):
    """
    Drawing surface bound to an AnnotationSession.

    The session owns all drawing state; this widget only paints the latest
    composite and translates Qt input events.
    """

    BACKGROUND_COLOR = QColor('#000000')

    def __init__(self, session: AnnotationSession, parent: Optional[QWidget] = None):
        super().__init__(parent)

        self._session = session
        self._image: Optional[QImage] = session.composite

        self._setup_widget()

        self._session.composite_updated.connect(self._on_composite_updated)
        self._session.base_image_changed.connect(self.updateGeometry)
        self._session.drawing_started.connect(self._on_drawing_started)
        self._session.drawing_finished.connect(self._on_drawing_finished)

    def _setup_widget(self):
        """Configure input attributes."""
        self.setAttribute(Qt.WidgetAttribute.WA_AcceptTouchEvents, True)
        self.setMouseTracking(False)
        self.setCursor(QCursor(Qt.CursorShape.CrossCursor))
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(160, 120)

    @property
    def session(self) -> AnnotationSession:
        return self._session

    # ==================== Geometry ====================

    def surface_rect(self) -> QRectF:
        """
        On-screen rect of the displayed raster, in widget coordinates.

        Computed from the current widget size on every call. Empty when no
        image is loaded.
        """
        intrinsic = self._session.intrinsic_size
        if intrinsic.isEmpty() or self.width() <= 0 or self.height() <= 0:
            return QRectF()

        displayed = QSizeF(intrinsic).scaled(
            QSizeF(self.width(), self.height()),
            Qt.AspectRatioMode.KeepAspectRatio
        )
        left = (self.width() - displayed.width()) / 2.0
        top = (self.height() - displayed.height()) / 2.0
        return QRectF(left, top, displayed.width(), displayed.height())

    # ==================== Painting ====================

    def _on_composite_updated(self, image: QImage):
        self._image = image
        # update() is coalesced by Qt, which limits repaint rate during bursts
        self.update()

    def paintEvent(self, event):
        painter = QPainter(self)
        try:
            painter.fillRect(self.rect(), self.BACKGROUND_COLOR)
            target = self.surface_rect()
            if self._image is not None and not target.isEmpty():
                painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)
                painter.drawImage(target, self._image)
        finally:
            painter.end()

    # ==================== Mouse Events ====================

    def mousePressEvent(self, event):
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return

        pos = event.position()
        if not self.surface_rect().contains(pos):
            super().mousePressEvent(event)
            return

        self._session.pointer_down(MousePointer(pos.x(), pos.y()), self.surface_rect())
        event.accept()

    def mouseMoveEvent(self, event):
        if not self._session.is_drawing:
            super().mouseMoveEvent(event)
            return

        # The mouse grab holds back Leave until release, so check the surface here
        pos = event.position()
        if self.surface_rect().contains(pos):
            self._session.pointer_move(MousePointer(pos.x(), pos.y()), self.surface_rect())
        else:
            self._session.pointer_leave()
        event.accept()

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton and self._session.is_drawing:
            self._session.pointer_up()
            event.accept()
        else:
            super().mouseReleaseEvent(event)

    def leaveEvent(self, event):
        """Dragging off the widget ends the stroke."""
        self._session.pointer_leave()
        super().leaveEvent(event)

    # ==================== Touch Events ====================

    def event(self, event):
        """Intercept touch events before Qt synthesizes mouse events from them."""
        event_type = event.type()

        if event_type in (QEvent.Type.TouchBegin, QEvent.Type.TouchUpdate):
            touches = tuple(
                self._touch_position(p)
                for p in event.points()
                if p.state() != QEventPoint.State.Released
            )
            pointer = TouchPointer(touches)
            on_surface = bool(touches) and self.surface_rect().contains(QPointF(*touches[0]))

            if event_type == QEvent.Type.TouchBegin:
                if on_surface:
                    self._session.pointer_down(pointer, self.surface_rect())
            elif touches and not on_surface:
                self._session.pointer_leave()
            else:
                self._session.pointer_move(pointer, self.surface_rect())
            event.accept()
            return True

        if event_type in (QEvent.Type.TouchEnd, QEvent.Type.TouchCancel):
            self._session.pointer_up()
            event.accept()
            return True

        return super().event(event)

    def _touch_position(self, point: QEventPoint):
        """Widget coordinates of a touch point (scene positions are window-relative)."""
        pos = self.mapFrom(self.window(), point.scenePosition())
        return pos.x(), pos.y()

    # ==================== Cursor ====================

    def _on_drawing_started(self):
        self.setCursor(QCursor(Qt.CursorShape.BlankCursor))

    def _on_drawing_finished(self):
        self.setCursor(QCursor(Qt.CursorShape.CrossCursor))


__all__ = ['AnnotationCanvas']
