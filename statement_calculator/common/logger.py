"""Shared logger for the statement calculator."""
import logging
import os


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_LEVEL_ENV = "STATEMENT_CALCULATOR_LOG_LEVEL"


def resolve_level(name: str) -> int:
    """
    Map a level name such as ``debug`` to its logging constant.

    :param str name: Level name, case insensitive

    :return: Logging level, INFO for unknown names
    :rtype: int
    """
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


logger: logging.Logger = logging.getLogger("statement_calculator")

if not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(resolve_level(os.environ.get(LOG_LEVEL_ENV, "INFO")))
