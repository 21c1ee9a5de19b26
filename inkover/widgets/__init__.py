"""
Widgets for the annotation window.

- annotation_canvas: display + input surface bound to a session
- annotation_toolbar: palette, brush sizes, undo and clear
- annotation_window: standalone host window
"""

from .annotation_canvas import AnnotationCanvas
from .annotation_toolbar import AnnotationToolbar
from .annotation_window import AnnotationWindow

__all__ = ['AnnotationCanvas', 'AnnotationToolbar', 'AnnotationWindow']
