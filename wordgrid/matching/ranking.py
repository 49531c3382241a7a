"""Top-N reduction of a frequency table."""

import heapq
from collections.abc import Iterable
from dataclasses import dataclass

from .frequency import FrequencyTable, WordTally


@dataclass(frozen=True)
class RankedWord:
    """A grid-present word and its stream frequency."""
    word: str
    count: int


def _rank_key(item: tuple[str, WordTally]) -> tuple[int, str]:
    key, tally = item
    return (-tally.count, key)


def rank(table: FrequencyTable, top_n: int = 10) -> list[RankedWord]:
    """
    Select the most frequent eligible words.

    Ordered by descending stream count, then ascending folded key. Runs on a
    complete table only; partial tables would rank differently.

    Args:
        table: Fully merged frequency table for one stream
        top_n: Maximum number of entries to return

    Returns:
        Up to top_n RankedWord entries carrying each word's surface form
    """
    return rank_items(table.items(), top_n)


def rank_items(items: Iterable[tuple[str, WordTally]], top_n: int = 10) -> list[RankedWord]:
    """Rank a (key, tally) snapshot taken from a complete table."""
    if top_n <= 0:
        return []

    eligible = (item for item in items if item[1].eligible)
    best = heapq.nsmallest(top_n, eligible, key=_rank_key)
    return [RankedWord(word=tally.surface, count=tally.count) for _key, tally in best]
