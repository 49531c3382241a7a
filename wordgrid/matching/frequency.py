"""
Per-call frequency accumulation for a word stream.

A FrequencyTable maps the folded key of each stream word to a WordTally.
Updates take an internal lock so workers can merge into one shared table
without lost updates. Merging is commutative and associative: counts are
summed, eligibility is OR-ed and the surface form is taken from the
earliest stream position, so the final table does not depend on the order
in which chunks finish.
"""

import threading
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Optional

from ..index.grid_index import fold


@dataclass
class WordTally:
    """Occurrences of one case-insensitive word within a stream."""
    surface: str            # Spelling at the earliest stream position
    position: int           # Earliest stream position seen
    count: int = 0
    eligible: bool = False  # Present in the grid


class FrequencyTable:
    """Thread-safe case-insensitive counting map."""

    def __init__(self) -> None:
        self._entries: dict[str, WordTally] = {}
        self._lock = threading.Lock()

    def add(self, word: str, position: int, count: int = 1) -> None:
        """Increment-or-insert the word seen at a stream position."""
        key = fold(word)
        with self._lock:
            self._upsert(key, word, position, count, eligible=False)

    def merge(self, other: "FrequencyTable") -> None:
        """Fold another table's tallies into this one."""
        if other is self:
            return

        snapshot = other.items()
        with self._lock:
            for key, tally in snapshot:
                self._upsert(key, tally.surface, tally.position, tally.count, tally.eligible)

    def resolve_membership(self, predicate: Callable[[str], bool]) -> None:
        """Mark every tallied word for which the predicate holds as eligible."""
        with self._lock:
            for tally in self._entries.values():
                if not tally.eligible:
                    tally.eligible = predicate(tally.surface)

    def get(self, word: str) -> Optional[WordTally]:
        with self._lock:
            tally = self._entries.get(fold(word))
            if tally is None:
                return None
            return WordTally(tally.surface, tally.position, tally.count, tally.eligible)

    def count(self, word: str) -> int:
        tally = self.get(word)
        return tally.count if tally else 0

    def items(self) -> list[tuple[str, WordTally]]:
        """Snapshot of (key, tally) pairs; tallies are copies."""
        with self._lock:
            return [
                (key, WordTally(t.surface, t.position, t.count, t.eligible))
                for key, t in self._entries.items()
            ]

    def eligible(self) -> Iterator[tuple[str, WordTally]]:
        return ((key, tally) for key, tally in self.items() if tally.eligible)

    @property
    def total(self) -> int:
        """Number of counted stream items."""
        with self._lock:
            return sum(t.count for t in self._entries.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _upsert(self, key: str, surface: str, position: int, count: int, eligible: bool) -> None:
        # Caller holds the lock
        tally = self._entries.get(key)
        if tally is None:
            self._entries[key] = WordTally(surface, position, count, eligible)
            return

        if position < tally.position:
            tally.surface = surface
            tally.position = position
        tally.count += count
        tally.eligible = tally.eligible or eligible
