# backend/utils/logger.py
import logging

import config

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logger(name: str, level=None) -> logging.Logger:
    """
    Attach one stream handler to `name` and set its level.
    `level` may be a logging constant or a level name; it defaults to config.LOG_LEVEL.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    if level is None:
        level = config.LOG_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)
    return logger


logger = setup_logger(config.LOGGER_NAME)
