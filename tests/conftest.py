"""
Pytest fixtures for Inkover tests.

Qt runs on the offscreen platform so tests need no display.
"""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtGui import QColor, QImage
from PyQt6.QtWidgets import QApplication

from inkover.controllers.session_controller import AnnotationSession
from inkover.core.base_image import BaseImage


BASE_FILL = "#808080"


@pytest.fixture(scope="session", autouse=True)
def qapp():
    """One QApplication for the whole test session."""
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def make_image():
    """Factory for solid ARGB32 images."""
    def _make(width: int, height: int, color: str = BASE_FILL) -> QImage:
        image = QImage(width, height, QImage.Format.Format_ARGB32)
        image.fill(QColor(color))
        return image
    return _make


@pytest.fixture
def make_base_image(make_image):
    """Factory for PNG-encoded BaseImage payloads."""
    def _make(width: int, height: int, color: str = BASE_FILL) -> BaseImage:
        return BaseImage.from_qimage(make_image(width, height, color))
    return _make


@pytest.fixture
def recorder():
    """Collects signal payloads in emission order."""
    class Recorder:
        def __init__(self):
            self.calls = []

        def __call__(self, *args):
            self.calls.append(args[0] if len(args) == 1 else args)

        @property
        def last(self):
            return self.calls[-1]

    return Recorder


@pytest.fixture
def session(make_base_image):
    """Session loaded with a 1000x600 gray base image."""
    annotation_session = AnnotationSession()
    annotation_session.load_base_image(make_base_image(1000, 600))
    return annotation_session
