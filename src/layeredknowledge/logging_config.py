"""
Logging Configuration
Opt-in output for applications that build and project domain knowledge.

Every module logs to a child of the ``layeredknowledge`` logger:

* DEBUG: layers and relations added, removed or replaced; tables reset;
  scores degraded to insufficient evidence.
* INFO: projection summaries and bulk table fills.
* WARNING: relations rejected because they would close a cycle.

The library never calls ``setup_logging`` itself, so it stays silent until an
application does.
"""
import logging
import sys
from typing import List, Optional, TextIO

from layeredknowledge.config import LOG_DATE_FORMAT, LOG_FORMAT, LOGGER_NAME


def _make_handlers(level: int, log_file: Optional[str], stream: TextIO) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(stream)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
    return handlers


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Route the package's log records to a stream and optionally a file.

    Calling it again replaces the previous handlers, so a notebook can
    switch to DEBUG while inspecting a projection without duplicating lines.

    Args:
        level: Logging level; DEBUG shows every container mutation.
        log_file: Optional path; the file is overwritten.
        stream: Console stream, stdout by default.

    Returns:
        The ``layeredknowledge`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in _make_handlers(level, log_file, stream or sys.stdout):
        logger.addHandler(handler)

    logger.info(f"Logging initialized at {logging.getLevelName(level)}.")
    return logger
