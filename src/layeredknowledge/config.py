"""
Global Constants
================
This module serves as the central registry for the numeric defaults shared by
the scoring functions and the projector.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (0.5, 0.0, 3) from being scattered
   throughout the scoring and projection code.
2. Consistency: The scorer and the projector must agree on what "enough
   evidence" means; both read it from here.

Exports:
    DEFAULT_MINIMUM (float): Forward score a pair must exceed before the
        backward score is computed.
    DEFAULT_THRESHOLD (float): Default score a table cell must reach to become
        an edge of the variable graph.
    MIN_OBSERVATIONS (int): Fewest fully observed pairs a score is defined on.
    LOGGER_NAME (str): Root of the package logger hierarchy.
    LOG_FORMAT (str): Record format used by ``setup_logging``.
    LOG_DATE_FORMAT (str): Timestamp format used by ``setup_logging``.
"""

DEFAULT_MINIMUM: float = 0.5
DEFAULT_THRESHOLD: float = 0.0

# A simple regression has n - 2 degrees of freedom
MIN_OBSERVATIONS: int = 3

LOGGER_NAME: str = "layeredknowledge"

# Format: Time - Module - Level - Message
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT: str = "%H:%M:%S"
