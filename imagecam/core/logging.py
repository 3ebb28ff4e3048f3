import os
import sys
from typing import List

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def setup_logging(debug_mode: bool = False, log_dir: str = "logs") -> List[int]:
    """
    Replace loguru's default sink with a console sink and, when ``log_dir``
    is set, a rotating DEBUG file. Returns the ids of the added sinks.
    """
    logger.remove()
    level = "DEBUG" if debug_mode else "INFO"
    sinks = [logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT)]

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        # renames and snapshots log from worker threads
        sinks.append(logger.add(
            os.path.join(log_dir, "imagecam_{time:YYYYMMDD}.log"),
            rotation="10 MB", retention="1 week", level="DEBUG", enqueue=True,
        ))

    logger.debug(f"Logging to {log_dir or 'console only'} at {level}")
    return sinks
