"""
AnnotationWindow - Standalone window hosting canvas and toolbar

Acts as the host application: every annotation change is mirrored to an
output PNG, which is removed again when no annotation remains.
"""

import logging
from pathlib import Path
from typing import Optional

from PyQt6.QtWidgets import QMainWindow, QWidget, QVBoxLayout
from PyQt6.QtGui import QKeySequence, QShortcut

from ..config import Config
from ..controllers.session_controller import AnnotationSession
from ..core.base_image import BaseImage
from ..services.export_gate import AnnotationResult
from .annotation_canvas import AnnotationCanvas
from .annotation_toolbar import AnnotationToolbar

logger = logging.getLogger(__name__)


class AnnotationWindow(QMainWindow):
    """Main window: toolbar above the canvas, output mirrored to disk."""

    def __init__(self, output_path: Path, parent: Optional[QWidget] = None):
        super().__init__(parent)

        self._output_path = Path(output_path)
        self._session = AnnotationSession(self)

        self.setWindowTitle(Config.APP_NAME)
        self.resize(Config.DEFAULT_WINDOW_WIDTH, Config.DEFAULT_WINDOW_HEIGHT)

        self._setup_ui()
        self._connect_signals()

    def _setup_ui(self):
        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(6)

        self._toolbar = AnnotationToolbar()
        self._canvas = AnnotationCanvas(self._session)
        layout.addWidget(self._toolbar)
        layout.addWidget(self._canvas, 1)

        self.setCentralWidget(central)

    def _connect_signals(self):
        self._toolbar.color_changed.connect(self._session.set_color)
        self._toolbar.brush_width_changed.connect(self._session.set_brush_width)
        self._toolbar.undo_clicked.connect(self._session.undo)
        self._toolbar.clear_clicked.connect(self._session.clear)

        self._session.history_changed.connect(self._toolbar.set_history_count)
        self._session.base_image_changed.connect(self._on_base_image_changed)
        self._session.annotation_changed.connect(self._on_annotation_changed)

        undo_shortcut = QShortcut(QKeySequence(QKeySequence.StandardKey.Undo), self)
        undo_shortcut.activated.connect(self._session.undo)

    @property
    def session(self) -> AnnotationSession:
        return self._session

    @property
    def canvas(self) -> AnnotationCanvas:
        return self._canvas

    @property
    def toolbar(self) -> AnnotationToolbar:
        return self._toolbar

    @property
    def output_path(self) -> Path:
        return self._output_path

    def load_image(self, base_image: BaseImage):
        """Start annotating a new base image."""
        self._session.load_base_image(base_image)

    def _on_base_image_changed(self):
        state = self._session.state
        self._toolbar.set_color(state.color)
        self._toolbar.set_brush_width(state.brush_width)
        size = self._session.intrinsic_size
        self.setWindowTitle(f"{Config.APP_NAME} - {size.width()}x{size.height()}")

    def _on_annotation_changed(self, result: Optional[AnnotationResult]):
        if result is None:
            if self._output_path.exists():
                self._output_path.unlink()
                logger.info(f"No annotation, removed {self._output_path}")
            return

        self._output_path.parent.mkdir(parents=True, exist_ok=True)
        self._output_path.write_bytes(result.pixel_data)
        logger.info(f"Annotation written: {self._output_path} ({result.width}x{result.height})")


__all__ = ['AnnotationWindow']
