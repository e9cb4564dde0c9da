"""Logging configuration."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
import sys

from subrip.core.config import get_settings
from subrip.core.log_filter import SensitiveDataFilter


def setup_logging() -> None:
    """Configure logging with a stdout handler and an optional rotating file handler."""
    settings = get_settings()

    handlers: list[logging.Handler] = [
        # Stdout handler for console output
        logging.StreamHandler(sys.stdout),
    ]

    if settings.log_to_file:
        logs_dir = Path(settings.log_dir)
        logs_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(
            # Rotating file handler (10MB, 5 backups)
            RotatingFileHandler(
                logs_dir / "subrip.log",
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=5,
                encoding="utf-8",
            )
        )

    # Redaction and payload truncation apply to every handler
    if settings.enable_log_redaction:
        log_filter = SensitiveDataFilter(max_arg_length=settings.log_max_arg_length)
        for handler in handlers:
            handler.addFilter(log_filter)

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def get_logger(name: str) -> logging.Logger:
    """Get logger instance for module."""
    return logging.getLogger(name)
