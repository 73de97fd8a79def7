from __future__ import annotations

import logging
import sys

from checkhttp.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: str = settings.LOG_LEVEL, log_file: str | None = settings.LOG_FILE
) -> logging.Logger:
    """
    Send every record to stdout, and also to ``log_file`` when one is given.

    A log file that cannot be opened is reported and skipped.
    """
    formatter = logging.Formatter(LOG_FORMAT)
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as exc:
            root_logger.warning("cannot open log file %s, logging to stdout only: %s", log_file, exc)
        else:
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

    return root_logger
