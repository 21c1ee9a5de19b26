"""
Base image supplied by the host for one annotation session.
"""

import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path

from PyQt6.QtGui import QImage

from ..utils.image_utils import encode_image

logger = logging.getLogger(__name__)


class BaseImageError(ValueError):
    """Raised when base image bytes cannot be decoded into a raster."""
    pass


@dataclass(frozen=True)
class BaseImage:
    """Immutable raster payload: encoded bytes plus a MIME type tag."""

    pixel_data: bytes
    mime_type: str = "image/png"

    @classmethod
    def from_file(cls, image_path: Path) -> 'BaseImage':
        """
        Load a base image from disk.

        Args:
            image_path: Path to an image file

        Returns:
            BaseImage with the file's bytes and a guessed MIME type

        Raises:
            BaseImageError: if the file is missing or cannot be read
        """
        image_path = Path(image_path)
        if not image_path.exists():
            raise BaseImageError(f"Image file not found: {image_path}")

        try:
            pixel_data = image_path.read_bytes()
        except OSError as e:
            raise BaseImageError(f"Could not read image file {image_path}: {e}") from e

        mime_type, _ = mimetypes.guess_type(image_path.name)
        return cls(pixel_data, mime_type or "application/octet-stream")

    @classmethod
    def from_qimage(cls, image: QImage) -> 'BaseImage':
        """Wrap an in-memory QImage as a PNG-encoded base image."""
        return cls(encode_image(image, "PNG"), "image/png")

    def to_qimage(self) -> QImage:
        """
        Decode into an ARGB32 raster.

        Raises:
            BaseImageError: if the bytes are not a readable image
        """
        image = QImage.fromData(self.pixel_data)
        if image.isNull():
            raise BaseImageError(
                f"Could not decode base image ({self.mime_type}, {len(self.pixel_data)} bytes)"
            )
        return image.convertToFormat(QImage.Format.Format_ARGB32)


__all__ = ['BaseImage', 'BaseImageError']
