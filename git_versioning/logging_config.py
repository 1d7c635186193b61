"""
Logging configuration for git-versioning.

Centralized logging setup shared by the CLI and the library modules.
Log output never goes to stdout, which is reserved for the version.
"""

import sys
from loguru import logger
from rich.console import Console

LOG_FORMAT = '<green>{time:YYYY/MM/DD HH:mm:ss}</green> | {level.icon}  - <level>{message}</level>'


def setup_logging(log_level: str = 'INFO', console: Console = None) -> None:
    """
    Set up logging configuration.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console: Rich Console instance to print through (optional)
    """
    logger.remove()

    if console:
        logger.add(
            lambda msg: console.print(msg, end='', markup=False, highlight=False),
            level=log_level,
            format=LOG_FORMAT
        )
    else:
        logger.add(
            sys.stderr,
            level=log_level,
            format=LOG_FORMAT,
            colorize=True
        )
