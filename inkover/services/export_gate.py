"""
Export Gate - Hand the host a flattened annotation or a "no annotation" signal

The flattened raster is always recomposited from the base image and the
stroke history as they are at call time, then encoded as PNG. An empty
history yields None, meaning "use the base image unmodified".
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

import numpy as np
from PyQt6.QtGui import QImage

from ..config import Config
from ..core.stroke_model import Stroke
from ..rendering.compositor import composite_strokes
from ..utils.image_utils import encode_image, qimage_to_array

logger = logging.getLogger(__name__)


class ExportError(RuntimeError):
    """Raised when the flattened raster cannot be encoded."""
    pass


@dataclass(frozen=True)
class AnnotationResult:
    """Flattened raster payload handed to the host."""

    pixel_data: bytes
    mime_type: str
    width: int
    height: int

    def to_qimage(self) -> QImage:
        """Decode the payload back into a QImage."""
        return QImage.fromData(self.pixel_data)

    def to_array(self) -> np.ndarray:
        """Decode the payload into an RGBA array of shape (height, width, 4)."""
        return qimage_to_array(self.to_qimage())


def flatten(base: QImage, strokes: Iterable[Stroke]) -> QImage:
    """Synchronously composite strokes over the base image."""
    return composite_strokes(base, strokes)


def export_annotation(
    base: Optional[QImage],
    strokes: Iterable[Stroke]
) -> Optional[AnnotationResult]:
    """
    Produce the host-facing annotation result.

    Args:
        base: Base raster, or None when no image is loaded
        strokes: Stroke history in z-order, as it stands now

    Returns:
        AnnotationResult with PNG bytes, or None when there are no strokes
        (or no base image)

    Raises:
        ExportError: if PNG encoding fails
    """
    strokes = list(strokes)
    if base is None or not strokes:
        return None

    composite = flatten(base, strokes)
    pixel_data = encode_image(composite, Config.EXPORT_FORMAT)
    if not pixel_data:
        raise ExportError(
            f"Failed to encode {composite.width()}x{composite.height()} annotation as {Config.EXPORT_FORMAT}"
        )

    logger.debug(f"Exported {len(strokes)} stroke(s), {len(pixel_data)} bytes")
    return AnnotationResult(
        pixel_data=pixel_data,
        mime_type=Config.EXPORT_MIME_TYPE,
        width=composite.width(),
        height=composite.height()
    )


__all__ = [
    'AnnotationResult',
    'ExportError',
    'flatten',
    'export_annotation'
]
