"""
Inkover - Main Entry Point

Opens an image for annotation. Every change is mirrored to
'<image>_annotated.png' (or the path given as second argument).

Usage:
    python -m inkover.main [image] [output.png]
"""

import sys
from pathlib import Path
from typing import Optional

from PyQt6.QtWidgets import QApplication, QFileDialog, QMessageBox

from .config import Config
from .core.base_image import BaseImage, BaseImageError
from .utils.logging_config import LoggingConfig


def setup_application() -> QApplication:
    """
    Initialize and configure the Qt application

    Returns:
        Configured QApplication instance
    """
    app = QApplication(sys.argv)

    app.setApplicationName(Config.APP_NAME)
    app.setApplicationVersion(Config.APP_VERSION)
    app.setOrganizationName(Config.APP_AUTHOR)

    return app


def _choose_image() -> Optional[Path]:
    """Ask for an image when none was given on the command line."""
    filename, _ = QFileDialog.getOpenFileName(
        None,
        "Open image to annotate",
        str(Path.home()),
        "Images (*.png *.jpg *.jpeg *.webp *.bmp)"
    )
    return Path(filename) if filename else None


def main():
    """
    Main application entry point

    Creates the application, loads the image and runs the event loop.
    """
    log_dir = Config.get_log_dir()
    LoggingConfig.setup_logging(log_dir)

    logger = LoggingConfig.get_logger(__name__)
    logger.info(f"Starting {Config.APP_NAME} {Config.APP_VERSION}...")
    logger.info(f"Log file: {LoggingConfig.get_log_file_path()}")

    app = setup_application()

    args = app.arguments()[1:]
    image_path = Path(args[0]) if args else _choose_image()
    if image_path is None:
        logger.info("No image selected, exiting")
        sys.exit(0)

    output_path = Path(args[1]) if len(args) > 1 else Config.default_output_path(image_path)

    from .widgets.annotation_window import AnnotationWindow
    window = AnnotationWindow(output_path)

    try:
        window.load_image(BaseImage.from_file(image_path))
    except BaseImageError as e:
        logger.error(f"Could not open {image_path}: {e}")
        QMessageBox.critical(
            None,
            Config.APP_NAME,
            f"Could not open image:\n{e}\n\nDetails are in {LoggingConfig.get_log_file_path()}"
        )
        sys.exit(1)

    window.show()
    logger.info(f"Annotating {image_path}, output: {output_path}")

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
