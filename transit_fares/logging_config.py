"""
Logging Setup

Console logging for the fare scripts. Diagnostics go to stderr so the fare
listing printed on stdout can be piped or redirected on its own.
"""

import logging
import sys
from typing import TextIO

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s %(funcName)s():%(lineno)d - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Third-party loggers kept at WARNING regardless of the requested level
QUIET_LOGGERS = ('polars',)


class _LevelColourFormatter(logging.Formatter):
    """Colours the level name only; the record itself is left untouched."""

    _COLOURS = {
        logging.DEBUG: '\033[36m',
        logging.INFO: '\033[32m',
        logging.WARNING: '\033[33m',
        logging.ERROR: '\033[31m',
        logging.CRITICAL: '\033[35m',
    }
    _RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        colour = self._COLOURS.get(record.levelno)
        if colour is None:
            return super().format(record)
        coloured = logging.makeLogRecord(record.__dict__)
        coloured.levelname = f"{colour}{record.levelname}{self._RESET}"
        return super().format(coloured)


def setup_logging(level: int | str = logging.INFO, stream: TextIO | None = None) -> logging.Handler:
    """
    Route log records to a single console handler.

    Args:
        level: Level name or number for the root and transit_fares loggers
        stream: Output stream (defaults to stderr)

    Returns:
        The installed handler
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")

    stream = stream or sys.stderr
    colour = hasattr(stream, 'isatty') and stream.isatty()
    formatter_cls = _LevelColourFormatter if colour else logging.Formatter

    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(formatter_cls(LOG_FORMAT, datefmt=DATE_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    logging.getLogger('transit_fares').setLevel(level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return handler
