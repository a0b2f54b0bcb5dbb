import logging
import os

DEFAULT_LOG_LEVEL = logging.WARNING


def _resolve_level(name):
    level = logging.getLevelName(name.upper())
    # getLevelName answers "Level X" for names it does not know
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL


LOG_LEVEL = _resolve_level(os.environ.get("EXERCISES_LOG_LEVEL", "WARNING"))


def get_logger(name: str) -> logging.Logger:
    """Module logger at LOG_LEVEL; handlers are left to the application."""
    logger = logging.getLogger(name)
    logger.setLevel(LOG_LEVEL)
    return logger
