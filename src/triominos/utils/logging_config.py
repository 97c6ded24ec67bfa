"""Logging setup for the Triominos engine.

Engine modules log through ``get_game_logger(__name__)``. Level and format are
read from ``TRIOMINOS_LOG_LEVEL`` and ``TRIOMINOS_LOG_FORMAT`` when the package
is imported, so a demo run can show the rotation search at DEBUG without code
changes.
"""

import logging
import os
import sys

PACKAGE_PREFIX = "triominos."
LEVEL_ENV_VAR = "TRIOMINOS_LOG_LEVEL"
FORMAT_ENV_VAR = "TRIOMINOS_LOG_FORMAT"

LOG_FORMATS = {
    "simple": "%(name)s - %(levelname)s - %(message)s",
    "detailed": "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
    "json": '{"time": "%(asctime)s", "logger": "%(name)s", "level": "%(levelname)s", "message": "%(message)s"}',
}


def setup_logging(level: str = "INFO", format_style: str = "simple") -> None:
    """
    Configure the root logger to write game logs to stdout.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL); unknown names fall back to INFO
        format_style: One of the keys of LOG_FORMATS; unknown styles fall back to "simple"
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMATS.get(format_style, LOG_FORMATS["simple"]),
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def setup_logging_from_env() -> None:
    """Configure logging from the TRIOMINOS_LOG_* environment variables."""
    setup_logging(
        level=os.getenv(LEVEL_ENV_VAR, "INFO"),
        format_style=os.getenv(FORMAT_ENV_VAR, "simple"),
    )


def get_game_logger(module_name: str) -> logging.Logger:
    """
    Get a logger named after a package module without the package prefix.

    'triominos.engine.game_engine' logs as 'engine.game_engine'.
    """
    if module_name.startswith(PACKAGE_PREFIX):
        module_name = module_name[len(PACKAGE_PREFIX):]
    return logging.getLogger(module_name)
