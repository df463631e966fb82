"""
Logging Configuration

This module provides configurable logging levels for the linter:
- Configurable logging levels (debug, info, warning, error)
- Console output on stderr, so reports on stdout stay machine-readable
- Optional log file output with rotation
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional


class LoggingConfig:
    """
    Centralized logging configuration for the linter.

    Provides configurable logging levels and optional file output.
    """

    def __init__(self):
        self._log_file_handler: Optional[logging.Handler] = None
        self._console_handler: Optional[logging.Handler] = None

    def configure_logging(
        self,
        level: str = "warning",
        log_file: Optional[str] = None,
        max_log_file_size: int = 10 * 1024 * 1024,  # 10MB
        backup_count: int = 5
    ) -> None:
        """
        Configure logging for the application.

        Calling it again replaces the handlers installed by a previous call.

        Args:
            level: Logging level (debug, info, warning, error)
            log_file: Optional log file path
            max_log_file_size: Maximum log file size before rotation
            backup_count: Number of backup log files to keep
        """
        log_level = self._get_log_level(level)

        root_logger = logging.getLogger()
        root_logger.setLevel(log_level)
        self._remove_handlers(root_logger)

        self._console_handler = logging.StreamHandler(sys.stderr)
        self._console_handler.setLevel(log_level)
        self._console_handler.setFormatter(self._create_console_formatter(level.lower() == "debug"))
        root_logger.addHandler(self._console_handler)

        if log_file:
            self._configure_file_logging(log_file, log_level, max_log_file_size, backup_count)

        logger = logging.getLogger(__name__)
        logger.debug(f"Logging configured: level={level}, file={log_file}")

    def _remove_handlers(self, root_logger: logging.Logger) -> None:
        for handler in (self._console_handler, self._log_file_handler):
            if handler is not None:
                root_logger.removeHandler(handler)
                handler.close()
        self._console_handler = None
        self._log_file_handler = None

    def _get_log_level(self, level_str: str) -> int:
        """Convert string log level to logging constant."""
        level_map = {
            "debug": logging.DEBUG,
            "info": logging.INFO,
            "warning": logging.WARNING,
            "error": logging.ERROR
        }
        return level_map.get(level_str.lower(), logging.WARNING)

    def _create_console_formatter(self, debug_mode: bool) -> logging.Formatter:
        """Create formatter for console output."""
        if debug_mode:
            return logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S"
            )
        return logging.Formatter("%(levelname)s - %(message)s")

    def _create_file_formatter(self) -> logging.Formatter:
        """Create formatter for file output."""
        return logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

    def _configure_file_logging(
        self,
        log_file: str,
        log_level: int,
        max_size: int,
        backup_count: int
    ) -> None:
        """Configure file logging with rotation."""
        try:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            self._log_file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=max_size,
                backupCount=backup_count,
                encoding='utf-8'
            )
        except OSError as e:
            # Log file setup failed, continue with console only
            logging.getLogger(__name__).warning(f"Failed to setup log file {log_file}: {e}")
            return

        self._log_file_handler.setLevel(log_level)
        self._log_file_handler.setFormatter(self._create_file_formatter())
        logging.getLogger().addHandler(self._log_file_handler)

    def reset(self) -> None:
        """Remove the handlers installed by configure_logging."""
        root_logger = logging.getLogger()
        self._remove_handlers(root_logger)
        root_logger.setLevel(logging.WARNING)


# Global logging configuration instance
logging_config = LoggingConfig()


def configure_logging(level: str = "warning", log_file: Optional[str] = None) -> None:
    """
    Convenience function to configure logging.

    Args:
        level: Logging level (debug, info, warning, error)
        log_file: Optional log file path
    """
    logging_config.configure_logging(level=level, log_file=log_file)
