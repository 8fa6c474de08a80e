"""
Logger for the HKID checker package.
"""

import logging
import os
import sys

from hkid_checker.config import SETTINGS

LOG_LEVEL_ENV = "HKID_CHECKER_LOG_LEVEL"


def get_logger(name: str = "hkid_checker") -> logging.Logger:
    logger = logging.getLogger(name)
    level_name = os.getenv(LOG_LEVEL_ENV, SETTINGS.log_level).strip().upper()
    logger.setLevel(getattr(logging, level_name, logging.WARNING))

    if not logger.handlers:
        # stderr keeps CLI output on stdout clean
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


logger = get_logger()
