# site_mirror/logger.py
"""Project logger for SiteMirror.

Every module logs through the ``SiteMirror`` logger; the CLI calls
:func:`configure` once with its ``--log-level``, ``--log-file`` and
``--log-format`` options. Until then only warnings reach stdout.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "SiteMirror"
DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUPS = 3


def configure(
    level: Union[int, str] = "WARNING",
    log_file: Optional[Union[str, Path]] = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Route SiteMirror records to stdout and, if *log_file* is given, to a rotating file."""
    formatter = logging.Formatter(log_format)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        handlers.append(
            RotatingFileHandler(
                str(log_file),
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_FILE_BACKUPS,
                encoding="utf-8",
            )
        )

    lg = logging.getLogger(LOGGER_NAME)
    lg.setLevel(level)
    lg.handlers.clear()
    for handler in handlers:
        handler.setFormatter(formatter)
        lg.addHandler(handler)
    # records never reach the root logger
    lg.propagate = False
    return lg


logger = configure()

__all__ = ["logger", "configure", "LOGGER_NAME", "DEFAULT_FORMAT"]
