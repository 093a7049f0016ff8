"""
Logger factory shared by the core services and the UI.

Every logger gets a single stream handler with the same format, so output
from storage, store and export code lines up in the console.
"""

import logging
from pathlib import Path

LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def logger(name: str) -> logging.Logger:
    """
    Return a configured logger for `name`.

    File paths (e.g. ``__file__``) are reduced to the module stem.
    """
    if "/" in name or "\\" in name:
        name = Path(name).stem

    log = logging.getLogger(f"invoice_pro.{name}")
    if not log.handlers:
        log.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        log.addHandler(handler)
    return log
