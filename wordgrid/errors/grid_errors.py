"""
Grid construction and query argument error classifications.

These exceptions describe why a grid could not be indexed or why a call
was rejected before any work was done. None of them are retried: both
index construction and matching are deterministic computations.
"""

from enum import Enum
from typing import Any, Dict, Optional


class GridDefect(Enum):
    """Reasons a grid is rejected at construction time, in check order."""
    EMPTY = "empty"
    TOO_MANY_ROWS = "too large (rows)"
    ROW_TOO_LONG = "too large (row length)"
    RAGGED = "ragged rows"
    NOT_SQUARE = "not square"


class WordGridError(Exception):
    """Base class for all errors raised by the word grid package."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}


class InvalidGridError(WordGridError):
    """The supplied rows do not form a valid square grid."""

    def __init__(self, reason: GridDefect, row_count: Optional[int] = None,
                 row_length: Optional[int] = None, **kwargs):
        super().__init__(f"Invalid grid: {reason.value}", **kwargs)
        self.reason = reason
        self.row_count = row_count
        self.row_length = row_length


class InvalidArgumentError(WordGridError, ValueError):
    """A required argument is missing or of the wrong shape."""

    def __init__(self, message: str, argument: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.argument = argument
