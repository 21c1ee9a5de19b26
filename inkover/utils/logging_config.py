"""
Logging setup for Inkover

Everything goes to '<log dir>/inkover.log' at DEBUG, so dropped pointer
events and other quiet no-ops are on record. The console only shows INFO
and above unless asked otherwise.
"""
import logging
import sys
from pathlib import Path
from typing import Optional

from ..config import Config


class LoggingConfig:
    """Root logger configuration, applied once per process"""

    _initialized = False
    _log_file_path: Optional[Path] = None

    @classmethod
    def setup_logging(cls, log_dir: Path, console_level: int = logging.INFO) -> Path:
        """
        Attach the file and console handlers to the root logger.

        Calling it again is a no-op.

        Args:
            log_dir: Directory for the log file (created if missing)
            console_level: Minimum level printed to stdout

        Returns:
            Path of the log file in use
        """
        if cls._initialized:
            return cls._log_file_path

        log_dir.mkdir(parents=True, exist_ok=True)
        cls._log_file_path = log_dir / Config.LOG_FILE_NAME

        root = logging.getLogger()
        root.setLevel(logging.DEBUG)

        file_handler = logging.FileHandler(cls._log_file_path, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(Config.LOG_FILE_FORMAT, datefmt=Config.LOG_DATE_FORMAT)
        )
        root.addHandler(file_handler)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(console_level)
        console_handler.setFormatter(logging.Formatter(Config.LOG_CONSOLE_FORMAT))
        root.addHandler(console_handler)

        cls._initialized = True
        root.debug(f"Logging to {cls._log_file_path}")
        return cls._log_file_path

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        return logging.getLogger(name)

    @classmethod
    def get_log_file_path(cls) -> Optional[Path]:
        """Log file in use, or None before setup_logging()"""
        return cls._log_file_path


__all__ = ['LoggingConfig']
