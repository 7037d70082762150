import sys
from typing import Callable

from loguru import logger

# Anything that accepts one rendered line of output
LogSink = Callable[[str], None]

LOG_FORMAT = "{message}"


def setup_logging(level: str = "INFO", colorize: bool = False) -> None:
    """
    Route loguru output to stdout as bare lines, the way the code blocks
    print their results.
    """
    logger.remove()
    logger.add(sys.stdout, level=level, format=LOG_FORMAT, colorize=colorize)


def log(message: str) -> None:
    logger.opt(depth=1).info(message)
