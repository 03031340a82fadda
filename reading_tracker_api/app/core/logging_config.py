"""
Logging setup for the Reading Tracker API.

``setup_logging`` is called by the app factory, which may run several
times in one process (tests, reloads) and often after a server or test
runner has already installed its own handlers.  It therefore always
applies ``LOG_LEVEL``, adds a console handler only when the root
logger has none, and adds at most one file handler per log file.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _find_file_handler(logger: logging.Logger, log_path: Path) -> Optional[logging.FileHandler]:
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and Path(handler.baseFilename).resolve() == log_path:
            return handler
    return None


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> Optional[logging.FileHandler]:
    """Configure the root logger for the application.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file that should also receive log records.

    Returns
    -------
    Optional[logging.FileHandler]
        The handler writing to ``logfile`` (new or already attached),
        or ``None`` when no file was requested.
    """
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    if not logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if not logfile:
        return None

    log_path = Path(logfile).resolve()
    existing = _find_file_handler(logger, log_path)
    if existing is not None:
        return existing

    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)
    logger.info("Logging to %s at level %s", log_path, logging.getLevelName(logger.level))
    return file_handler
