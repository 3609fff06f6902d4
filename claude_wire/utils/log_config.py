"""Opt-in log output for the client's own loggers.

The library never touches the root logger. Applications that already configure
logging can ignore this module; the ``claude_wire`` and ``debug.payloads``
loggers propagate to whatever handlers they set up.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Iterable, Optional

from ..config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Loggers owned by this package: module loggers and the payload logger
CLIENT_LOGGERS = ("claude_wire", "debug.payloads")

# Marks handlers installed here so a second call replaces them
_HANDLER_FLAG = "_claude_wire_handler"


def _remove_own_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_FLAG, False):
            logger.removeHandler(handler)
            handler.close()


def _tagged(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    setattr(handler, _HANDLER_FLAG, True)
    return handler


def setup_logging(
    level: Optional[int] = None,
    log_dir: Optional[str] = None,
    console: bool = True,
    loggers: Iterable[str] = CLIENT_LOGGERS,
) -> Optional[str]:
    """Attach console and optional file output to the client's loggers.

    Calling it again replaces the handlers from the previous call. Records
    handled here stop propagating, so they are not printed twice when the
    root logger also has a console handler.

    Returns the log file path when ``settings.LOG_TO_FILE`` is set.
    """
    if level is None:
        level = logging.DEBUG if settings.DEBUG_MODE else logging.INFO

    log_file: Optional[Path] = None
    if settings.LOG_TO_FILE:
        directory = Path(log_dir or settings.LOG_DIR).resolve()
        directory.mkdir(parents=True, exist_ok=True)
        log_file = directory / settings.LOG_FILE

    for name in loggers:
        logger = logging.getLogger(name)
        _remove_own_handlers(logger)
        logger.setLevel(level)

        if console:
            logger.addHandler(_tagged(logging.StreamHandler(), level))
        if log_file is not None:
            # 10MB per file, 5 backups
            logger.addHandler(
                _tagged(
                    RotatingFileHandler(log_file, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8"),
                    level,
                )
            )
        logger.propagate = not (console or log_file is not None)

    return str(log_file) if log_file is not None else None


def reset_logging(loggers: Iterable[str] = CLIENT_LOGGERS) -> None:
    """Undo :func:`setup_logging`, returning records to the root logger."""
    for name in loggers:
        logger = logging.getLogger(name)
        _remove_own_handlers(logger)
        logger.setLevel(logging.NOTSET)
        logger.propagate = True
