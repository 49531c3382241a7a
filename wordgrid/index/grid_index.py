"""
Grid index: precomputed membership over every straight-line run of a grid.

Each row and each column of an n x n grid yields n*(n+1)/2 contiguous
substrings. All of them, together with their reversals, are folded to a
case-insensitive key and stored in one set per axis. Construction costs
O(n^3) character work; afterwards membership is a hash lookup.

The index is immutable once built and is safe to share between any number
of concurrent readers without locking.
"""

from collections.abc import Iterable, Iterator
from enum import Enum
from typing import Optional

from ..config.defaults import MAX_GRID_SIZE, WordGridConfig
from ..errors import GridDefect, InvalidArgumentError, InvalidGridError
from ..logging.config import get_subsystem_logger

logger = get_subsystem_logger(__name__, "index")


class Axis(Enum):
    """Direction along which substrings are extracted."""
    ROW = "row"
    COLUMN = "column"


def _fold_char(char: str) -> str:
    lowered = char.lower()
    # One cell stays one character (e.g. "\u0130" lowers to two code points)
    return lowered if len(lowered) == 1 else char


def fold(word: str) -> str:
    """Case-insensitive key for a word, one character per cell."""
    return "".join(_fold_char(char) for char in word)


def validate_grid(rows: tuple[str, ...], max_size: int = MAX_GRID_SIZE) -> None:
    """
    Check that rows form a non-empty square grid within size limits.

    Checks run in a fixed order and the first failing one is reported.

    Raises:
        InvalidGridError: With the matching GridDefect reason
    """
    if not rows:
        raise InvalidGridError(GridDefect.EMPTY, row_count=0)

    row_count = len(rows)
    if row_count > max_size:
        raise InvalidGridError(GridDefect.TOO_MANY_ROWS, row_count=row_count)

    for row in rows:
        if len(row) > max_size:
            raise InvalidGridError(GridDefect.ROW_TOO_LONG, row_count=row_count, row_length=len(row))

    first_length = len(rows[0])
    for row in rows:
        if len(row) != first_length:
            raise InvalidGridError(GridDefect.RAGGED, row_count=row_count, row_length=len(row))

    if row_count != first_length:
        raise InvalidGridError(GridDefect.NOT_SQUARE, row_count=row_count, row_length=first_length)


def extract_runs(lines: Iterable[str]) -> Iterator[str]:
    """Yield the folded key of every contiguous run of each line, both directions."""
    for line in lines:
        length = len(line)
        for start in range(length):
            for end in range(start + 1, length + 1):
                word = line[start:end]
                yield fold(word)

                reversed_word = word[::-1]
                if reversed_word != word:
                    yield fold(reversed_word)


class GridIndex:
    """
    Membership index over all row and column runs of a square grid.

    Attributes:
        rows: The grid rows as an immutable tuple
        row_words: Folded runs readable left-to-right or right-to-left
        col_words: Folded runs readable top-to-bottom or bottom-to-top
    """

    def __init__(self, rows: Iterable[str], max_size: int = MAX_GRID_SIZE) -> None:
        if rows is None:
            raise InvalidArgumentError("Grid rows must not be None", argument="rows")
        if isinstance(rows, str):
            raise InvalidArgumentError("Grid rows must be a sequence of strings, not a string",
                                       argument="rows")
        if not isinstance(max_size, int) or not 1 <= max_size <= MAX_GRID_SIZE:
            raise InvalidArgumentError(f"max_size must be between 1 and {MAX_GRID_SIZE}",
                                       argument="max_size")
        if not isinstance(rows, Iterable):
            raise InvalidArgumentError(
                "Grid rows must be an iterable of strings",
                argument="rows",
                context={"rows_type": type(rows).__name__}
            )

        grid = tuple(rows)
        for position, row in enumerate(grid):
            if not isinstance(row, str):
                raise InvalidArgumentError(
                    f"Grid row {position} is not a string",
                    argument="rows",
                    context={"row_index": position, "row_type": type(row).__name__}
                )

        try:
            validate_grid(grid, max_size)
        except InvalidGridError as e:
            logger.warning(
                "Rejected grid",
                reason=e.reason.value,
                row_count=e.row_count,
                row_length=e.row_length
            )
            raise

        columns = tuple("".join(row[col] for row in grid) for col in range(len(grid)))

        self._rows = grid
        self._row_words = frozenset(extract_runs(grid))
        self._col_words = frozenset(extract_runs(columns))

        logger.info(
            "Built grid index",
            size=self.size,
            row_entries=len(self._row_words),
            col_entries=len(self._col_words)
        )

    @classmethod
    def from_config(cls, rows: Iterable[str], config: WordGridConfig) -> "GridIndex":
        """Build an index using the configured grid limits."""
        return cls(rows, max_size=config.grid.max_size)

    @property
    def size(self) -> int:
        return len(self._rows)

    @property
    def rows(self) -> tuple[str, ...]:
        return self._rows

    @property
    def row_words(self) -> frozenset[str]:
        return self._row_words

    @property
    def col_words(self) -> frozenset[str]:
        return self._col_words

    def contains(self, word: Optional[str]) -> bool:
        """Return True if the word reads along any row or column, either direction."""
        if not word:
            return False

        key = fold(word)
        return key in self._row_words or key in self._col_words

    def axes_of(self, word: Optional[str]) -> frozenset[Axis]:
        """Return the axes on which the word can be read."""
        if not word:
            return frozenset()

        key = fold(word)
        axes = set()
        if key in self._row_words:
            axes.add(Axis.ROW)
        if key in self._col_words:
            axes.add(Axis.COLUMN)
        return frozenset(axes)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __repr__(self) -> str:
        return (f"GridIndex(size={self.size}, row_words={len(self._row_words)}, "
                f"col_words={len(self._col_words)})")


def build_index(rows: Iterable[str], config: Optional[WordGridConfig] = None) -> GridIndex:
    """Build a GridIndex, honouring the grid limits of an optional configuration."""
    if config is None:
        return GridIndex(rows)
    return GridIndex.from_config(rows, config)
