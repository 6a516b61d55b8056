import logging
import os

LOG_LEVEL_ENV = "IMAGEDUPES_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def resolve_level(name: str) -> int:
    """
    Pick the level for a logger name.

    The CLI module reports progress at INFO, everything else at WARNING.
    IMAGEDUPES_LOG_LEVEL overrides both; unknown level names are ignored.
    """
    default_level = logging.INFO if name.endswith(".cli") else logging.WARNING

    override = os.getenv(LOG_LEVEL_ENV)
    if not override:
        return default_level

    level = logging.getLevelName(override.strip().upper())
    return level if isinstance(level, int) else default_level


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(resolve_level(name))
    return logger
