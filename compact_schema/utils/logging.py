"""
Logging configuration.

Library modules only create loggers; handlers are installed here, by the CLI
or by the embedding application.
"""

import logging
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(
    level: Union[int, str] = "INFO",
    log_file: Optional[Union[str, Path]] = None,
) -> None:
    """
    Configure the root logger.

    Args:
        level: Logging level name or number
        log_file: Optional file to log to in addition to stderr
    """
    if isinstance(level, str):
        level = level.upper()

    handlers = [logging.StreamHandler()]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)
