"""Root logger configuration for jardoc, with Rich console output."""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from jardoc.core.config.settings import LoggingSettings, get_settings

_FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_loggers: dict[str, logging.Logger] = {}


def _console_handler(settings: LoggingSettings) -> logging.Handler:
    if settings.use_rich:
        # Java generics such as List<String> would be read as Rich markup.
        return RichHandler(
            console=Console(stderr=True),
            show_path=True,
            rich_tracebacks=True,
            markup=False,
        )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(settings.format))
    return handler


def setup_logging(settings: LoggingSettings | None = None) -> None:
    """Route jardoc log records to stderr and, optionally, a log file.

    Existing root handlers are replaced, so calling this again applies new
    settings instead of duplicating output.

    Args:
        settings: Logging settings. Uses global settings if not provided.
    """
    if settings is None:
        settings = get_settings().logging

    level = getattr(logging, settings.level)
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(_console_handler(settings))

    if settings.file:
        settings.file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(settings.file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Logger for a jardoc module.

    The first call configures logging from settings when the root logger has
    no handlers yet.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Cached logger instance.
    """
    if name not in _loggers:
        _loggers[name] = logging.getLogger(name)

        if not logging.getLogger().handlers:
            setup_logging()

    return _loggers[name]
