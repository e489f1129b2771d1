"""
Logging setup for the Agri Ledger API.

Handlers are attached to the ``agri_ledger_api`` package logger rather
than the root logger, so uvicorn and the test runner keep control of
their own output.  Every module logs through ``logging.getLogger(__name__)``
and inherits these handlers.
"""

import logging
from pathlib import Path

from .config import Settings

LOGGER_NAME = "agri_ledger_api"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(app_settings: Settings) -> logging.Logger:
    """Apply ``LOG_LEVEL`` and ``LOG_FILE`` to the package logger.

    Called by every ``create_app``.  The level always follows the latest
    settings; the console handler is attached once and a file handler
    once per log file path.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, app_settings.log_level.upper(), logging.INFO))
    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    # FileHandler subclasses StreamHandler, hence the exact type check.
    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        logger.addHandler(console)

    if app_settings.log_file:
        log_path = Path(app_settings.log_file).resolve()
        attached = {
            h.baseFilename for h in logger.handlers if isinstance(h, logging.FileHandler)
        }
        if str(log_path) not in attached:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
    return logger
