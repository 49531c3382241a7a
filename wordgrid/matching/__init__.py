"""
Stream matching: concurrent frequency counting and top-N ranking of the
stream words that can be read in a grid.
"""

from .frequency import FrequencyTable, WordTally
from .matcher import StreamMatcher, count_chunk, match
from .ranking import RankedWord, rank, rank_items

__all__ = [
    "FrequencyTable",
    "WordTally",
    "StreamMatcher",
    "count_chunk",
    "match",
    "RankedWord",
    "rank",
    "rank_items",
]
