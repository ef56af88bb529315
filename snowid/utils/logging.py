"""Gives out a production-ready logger.

This module provides:
- setup_logging: a function to assign package logging to a rotating file handler
"""

import logging
import os
from logging.handlers import RotatingFileHandler


def setup_logging(logger: logging.Logger, debug: bool = False, log_path: str = "logs"):
    """Sets logging of a logger to .log file and std stream.

    Args:
        logger (logging.Logger): The logger to configure, usually the package logger
        debug (bool): Log DEBUG records too if True, INFO and up otherwise
        log_path (str): Directory to keep rotated log files in
    """

    log_level = logging.DEBUG if debug else logging.INFO

    if not os.path.exists(log_path):
        os.makedirs(log_path)

    file_handler = RotatingFileHandler(
        os.path.join(log_path, "snowid.log"), maxBytes=10_000_000, backupCount=5
    )
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]")
    )
    file_handler.setLevel(log_level)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s: %(message)s"))
    console_handler.setLevel(log_level)

    for handler in logger.handlers:
        handler.close()
    logger.handlers = []
    logger.addHandler(file_handler)
    logger.addHandler(console_handler)
    logger.setLevel(log_level)
