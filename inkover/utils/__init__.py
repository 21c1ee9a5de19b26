"""Utility helpers for logging and image handling."""

from .logging_config import LoggingConfig
from .image_utils import encode_image, qimage_to_array

__all__ = ['LoggingConfig', 'encode_image', 'qimage_to_array']
