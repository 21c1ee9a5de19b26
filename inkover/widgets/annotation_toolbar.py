"""
Annotation Toolbar Widget

Single-row toolbar for the annotation canvas with:
- Color swatches from the configured palette
- Brush size buttons
- Undo/Clear buttons
"""

from typing import Optional, Dict

from PyQt6.QtWidgets import QWidget, QHBoxLayout, QPushButton, QFrame, QButtonGroup
from PyQt6.QtCore import pyqtSignal

from ..config import Config


class AnnotationToolbar(QWidget):
    """Toolbar emitting palette, brush and history commands."""

    # Signals
    color_changed = pyqtSignal(str)  # '#rrggbb'
    brush_width_changed = pyqtSignal(int)
    undo_clicked = pyqtSignal()
    clear_clicked = pyqtSignal()

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._color_buttons: Dict[str, QPushButton] = {}
        self._brush_buttons: Dict[int, QPushButton] = {}

        self._setup_ui()
        self._connect_signals()

        self.set_color(Config.DEFAULT_COLOR)
        self.set_brush_width(Config.DEFAULT_BRUSH_WIDTH)
        self.set_history_count(0)

    def _setup_ui(self):
        """Build the single-row toolbar UI."""
        self.setFixedHeight(40)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(4)

        self._btn_style = """
            QPushButton { background: #2d2d2d; border: 1px solid #444; border-radius: 3px; color: #e0e0e0; }
            QPushButton:hover { background: #3a3a3a; border-color: #555; }
            QPushButton:checked { background: #06b6d4; border-color: #06b6d4; color: #ffffff; }
            QPushButton:disabled { background: #252525; border-color: #333; color: #555; }
        """

        # ===== Color Swatches =====
        self._color_group = QButtonGroup(self)
        self._color_group.setExclusive(True)

        for name, color in Config.COLOR_PALETTE.items():
            btn = QPushButton()
            btn.setFixedSize(Config.SWATCH_SIZE, Config.SWATCH_SIZE)
            btn.setCheckable(True)
            btn.setToolTip(name)
            btn.setStyleSheet(
                f"QPushButton {{ background-color: {color}; border: 1px solid #555; border-radius: 12px; }}"
                f"QPushButton:checked {{ border: 2px solid #06b6d4; }}"
            )
            self._color_group.addButton(btn)
            self._color_buttons[color] = btn
            layout.addWidget(btn)

        layout.addWidget(self._create_separator())

        # ===== Brush Sizes =====
        self._brush_group = QButtonGroup(self)
        self._brush_group.setExclusive(True)

        for name, width in Config.BRUSH_SIZES.items():
            btn = QPushButton(name[0])
            btn.setFixedSize(28, 28)
            btn.setCheckable(True)
            btn.setToolTip(f"{name} brush ({width}px)")
            btn.setStyleSheet(self._btn_style)
            self._brush_group.addButton(btn)
            self._brush_buttons[width] = btn
            layout.addWidget(btn)

        layout.addWidget(self._create_separator())

        # ===== History Actions =====
        self._undo_btn = QPushButton("Undo")
        self._undo_btn.setToolTip("Undo last stroke (Ctrl+Z)")
        self._undo_btn.setStyleSheet(self._btn_style)
        layout.addWidget(self._undo_btn)

        self._clear_btn = QPushButton("Clear")
        self._clear_btn.setToolTip("Remove all strokes")
        self._clear_btn.setStyleSheet(self._btn_style.replace("#06b6d4", "#f44336"))
        layout.addWidget(self._clear_btn)

        layout.addStretch()

    def _create_separator(self) -> QFrame:
        """Create a vertical separator."""
        sep = QFrame()
        sep.setFrameShape(QFrame.Shape.VLine)
        sep.setStyleSheet("background: #444; max-width: 1px;")
        return sep

    def _connect_signals(self):
        """Connect internal signals."""
        for color, btn in self._color_buttons.items():
            btn.clicked.connect(lambda checked, c=color: self.color_changed.emit(c))

        for width, btn in self._brush_buttons.items():
            btn.clicked.connect(lambda checked, w=width: self.brush_width_changed.emit(w))

        self._undo_btn.clicked.connect(self.undo_clicked.emit)
        self._clear_btn.clicked.connect(self.clear_clicked.emit)

    # ==================== Public API ====================

    def set_color(self, color: str):
        """Check the swatch for color (no signal)."""
        btn = self._color_buttons.get(color.lower())
        if btn:
            btn.setChecked(True)

    def set_brush_width(self, width: int):
        """Check the button for width (no signal)."""
        btn = self._brush_buttons.get(width)
        if btn:
            btn.setChecked(True)

    def set_history_count(self, count: int):
        """Undo and clear are only available while strokes exist."""
        self._undo_btn.setEnabled(count > 0)
        self._clear_btn.setEnabled(count > 0)

    @property
    def undo_button(self) -> QPushButton:
        return self._undo_btn

    @property
    def clear_button(self) -> QPushButton:
        return self._clear_btn

    def color_button(self, color: str) -> Optional[QPushButton]:
        return self._color_buttons.get(color.lower())

    def brush_button(self, width: int) -> Optional[QPushButton]:
        return self._brush_buttons.get(width)


__all__ = ['AnnotationToolbar']
