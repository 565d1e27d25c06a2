"""
Purpose: Named loggers with a single stream handler.
Dependencies: logging, core/config.py.
"""

import logging
from core.config import LOG_LEVEL

FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def setup_logger(name: str = "tabletop", level=None) -> logging.Logger:
    """Create or fetch a named logger; repeated calls don't stack handlers."""
    logger = logging.getLogger(name)
    logger.setLevel(level if level is not None else LOG_LEVEL)

    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(FORMAT))
        logger.addHandler(handler)

    return logger
