"""
Image utilities for encoding and inspecting rasters
"""

import numpy as np
from PyQt6.QtCore import QBuffer, QIODevice
from PyQt6.QtGui import QImage


def encode_image(image: QImage, image_format: str = "PNG") -> bytes:
    """
    Encode a QImage into bytes in memory.

    Args:
        image: Source image
        image_format: Qt image format name (e.g. 'PNG')

    Returns:
        Encoded bytes, or b'' if encoding failed
    """
    buffer = QBuffer()
    buffer.open(QIODevice.OpenModeFlag.WriteOnly)
    try:
        if not image.save(buffer, image_format):
            return b''
        return bytes(buffer.data().data())
    finally:
        buffer.close()


def qimage_to_array(image: QImage) -> np.ndarray:
    """
    Copy a QImage into an RGBA uint8 array of shape (height, width, 4).

    Args:
        image: Source image (any format)

    Returns:
        numpy array owning its own memory
    """
    rgba = image.convertToFormat(QImage.Format.Format_RGBA8888)
    width, height = rgba.width(), rgba.height()
    if width == 0 or height == 0:
        return np.zeros((height, width, 4), dtype=np.uint8)

    stride = rgba.bytesPerLine()
    raw = rgba.constBits().asstring(rgba.sizeInBytes())
    array = np.frombuffer(raw, dtype=np.uint8).reshape(height, stride)
    return array[:, :width * 4].reshape(height, width, 4).copy()


__all__ = ['encode_image', 'qimage_to_array']
