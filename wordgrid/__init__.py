"""
wordgrid - word search over square character grids

Builds a membership index over every horizontal and vertical run of a
square grid (both reading directions, case-insensitive) and ranks the words
of a candidate stream that can be read in it by stream frequency.
"""

from .errors import (
    ConfigurationError,
    GridDefect,
    InvalidArgumentError,
    InvalidGridError,
    WordGridError,
)
from .index import Axis, GridIndex, build_index
from .matching import RankedWord, StreamMatcher, match

__version__ = "0.1.0"

__all__ = [
    "Axis",
    "GridIndex",
    "build_index",
    "StreamMatcher",
    "RankedWord",
    "match",
    "WordGridError",
    "GridDefect",
    "InvalidGridError",
    "InvalidArgumentError",
    "ConfigurationError",
]
