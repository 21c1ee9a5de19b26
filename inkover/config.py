"""
Global configuration for Inkover

Palette, brush sizes, export policy and user data locations for the
annotation engine.
"""

import os
import sys
from pathlib import Path
from typing import Final, Dict, Tuple


class Config:
    """Central configuration class for all application settings"""

    # Application metadata
    APP_NAME: Final[str] = "Inkover"
    APP_VERSION: Final[str] = "1.0.0"
    APP_AUTHOR: Final[str] = "Inkover"

    # Paths
    APP_ROOT: Final[Path] = Path(__file__).parent

    # Drawing palette (display name -> hex color)
    COLOR_PALETTE: Final[Dict[str, str]] = {
        "Red": "#ef4444",
        "Blue": "#3b82f6",
        "Green": "#22c55e",
        "Yellow": "#facc15",
        "White": "#ffffff",
    }

    # Brush sizes in raster pixels (display name -> width)
    BRUSH_SIZES: Final[Dict[str, int]] = {
        "Small": 4,
        "Medium": 12,
        "Large": 24,
    }

    DEFAULT_COLOR: Final[str] = "#ef4444"
    DEFAULT_BRUSH_WIDTH: Final[int] = 12

    # Export policy (fixed, not user configurable)
    EXPORT_FORMAT: Final[str] = "PNG"
    EXPORT_MIME_TYPE: Final[str] = "image/png"

    # Window settings
    DEFAULT_WINDOW_WIDTH: Final[int] = 1000
    DEFAULT_WINDOW_HEIGHT: Final[int] = 760
    SWATCH_SIZE: Final[int] = 24

    # Output written by the standalone app when no path is given
    DEFAULT_OUTPUT_SUFFIX: Final[str] = "_annotated.png"

    # Logging
    LOG_FILE_NAME: Final[str] = "inkover.log"
    LOG_FILE_FORMAT: Final[str] = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    LOG_CONSOLE_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
    LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def palette_colors(cls) -> Tuple[str, ...]:
        """All selectable colors, in palette order."""
        return tuple(cls.COLOR_PALETTE.values())

    @classmethod
    def brush_widths(cls) -> Tuple[int, ...]:
        """All selectable brush widths, smallest first."""
        return tuple(sorted(cls.BRUSH_SIZES.values()))

    @classmethod
    def get_user_data_dir(cls) -> Path:
        """
        Get user data directory.

        Uses system AppData/Local (Windows) or .local/share (Linux).
        A 'portable.txt' file next to the package switches to a local
        'data' folder instead.
        """
        portable_flag = cls.APP_ROOT.parent / 'portable.txt'
        if portable_flag.exists():
            user_dir = cls.APP_ROOT.parent / 'data'
        elif sys.platform == 'win32':
            base_path = Path(os.environ.get('LOCALAPPDATA', os.path.expanduser('~')))
            user_dir = base_path / 'Inkover'
        elif sys.platform == 'darwin':
            user_dir = Path.home() / 'Library' / 'Application Support' / 'Inkover'
        else:
            user_dir = Path.home() / '.local' / 'share' / 'Inkover'

        user_dir.mkdir(parents=True, exist_ok=True)
        return user_dir

    @classmethod
    def get_log_dir(cls) -> Path:
        """Get the log folder inside the user data directory."""
        return cls.get_user_data_dir() / 'logs'

    @classmethod
    def default_output_path(cls, image_path: Path) -> Path:
        """Output path used by the app: '<stem>_annotated.png' beside the input."""
        return image_path.with_name(image_path.stem + cls.DEFAULT_OUTPUT_SUFFIX)


__all__ = ['Config']
