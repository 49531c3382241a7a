"""
Error classification for grid indexing and stream matching.

Every failure is scoped to the single construction or query call that
triggered it and surfaces immediately to the direct caller.
"""

from .config_errors import ConfigurationError
from .grid_errors import (
    GridDefect,
    InvalidArgumentError,
    InvalidGridError,
    WordGridError,
)

__all__ = [
    "WordGridError",
    "GridDefect",
    "InvalidGridError",
    "InvalidArgumentError",
    "ConfigurationError",
]
