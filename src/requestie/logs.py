"""Logging setup.

The TUI owns the terminal, so records go to a file instead of stderr.
"""

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_HANDLER_NAME = "requestie-file"


def configure_logging(level: str, log_file: Path) -> logging.Logger:
    """Attach a file handler to the ``requestie`` logger.

    Calling this again replaces the previous handler rather than adding a
    second one.
    """
    logger = logging.getLogger("requestie")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)
            handler.close()

    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
