"""
Stream matcher: classify a word stream against a GridIndex and rank matches.

The stream is consumed lazily in fixed-size chunks. Each chunk is counted by
a worker of a per-call thread pool into a chunk-local FrequencyTable, which
also resolves grid membership for its distinct words before being merged
into the call's shared table. Once every chunk has finished, the shared
table is reduced to the top-N ranking on the calling thread.
"""

import asyncio
import threading
from collections.abc import Iterable, Iterator
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from itertools import islice
from typing import Any, Optional

from ..config.defaults import WordGridConfig, get_default_config
from ..errors import InvalidArgumentError
from ..index.grid_index import GridIndex
from ..logging.config import get_subsystem_logger
from .frequency import FrequencyTable
from .ranking import RankedWord, rank_items

logger = get_subsystem_logger(__name__, "matcher")

Chunk = list[tuple[int, Any]]


def _check_stream(words: Any) -> None:
    if words is None:
        raise InvalidArgumentError("Word stream must not be None", argument="words")
    if isinstance(words, str):
        raise InvalidArgumentError("Word stream must be an iterable of words, not a string",
                                   argument="words")
    if not isinstance(words, Iterable):
        raise InvalidArgumentError(
            "Word stream must be iterable",
            argument="words",
            context={"words_type": type(words).__name__}
        )


def _chunked(words: Iterable[Any], size: int) -> Iterator[Chunk]:
    """Split the stream into lists of (position, item) without materialising it."""
    numbered = enumerate(words)
    while True:
        chunk = list(islice(numbered, size))
        if not chunk:
            return
        yield chunk


def count_chunk(index: GridIndex, chunk: Chunk, table: FrequencyTable) -> None:
    """Count one chunk, resolve membership of its words and merge into the shared table."""
    local = FrequencyTable()
    for position, item in chunk:
        # None, empty strings and non-strings contribute nothing
        if isinstance(item, str) and item:
            local.add(item, position)

    local.resolve_membership(index.contains)
    table.merge(local)


class StreamMatcher:
    """
    Ranks the words of a stream that can be read in a grid.

    A matcher holds only configuration and a lazily created dispatcher used by
    submit() and match_async(). Every call builds its own frequency table and
    worker pool, so concurrent calls against one GridIndex do not interfere.
    """

    def __init__(self, config: Optional[WordGridConfig] = None) -> None:
        self.config = config or get_default_config()
        self.top_n = self.config.match.top_n
        self.max_workers = self.config.match.max_workers
        self.chunk_size = self.config.match.chunk_size

        self._dispatcher: Optional[ThreadPoolExecutor] = None
        self._dispatcher_lock = threading.Lock()
        self._closed = False

    def match(self, index: GridIndex, words: Iterable[Optional[str]]) -> list[str]:
        """
        Return up to top_n grid-present words from the stream, most frequent first.

        Args:
            index: A constructed GridIndex
            words: Stream of candidate words; None and empty items are skipped

        Returns:
            Surface forms ordered by stream frequency, ties broken lexically

        Raises:
            InvalidArgumentError: If words is None or not an iterable of words
        """
        return [entry.word for entry in self.match_ranked(index, words)]

    def match_ranked(self, index: GridIndex, words: Iterable[Optional[str]]) -> list[RankedWord]:
        """Same ranking as match(), with each word's stream count attached."""
        _check_stream(words)

        table = FrequencyTable()
        chunks = self._scan(index, words, table)
        snapshot = table.items()
        ranked = rank_items(snapshot, self.top_n)

        logger.debug(
            "Matched word stream",
            items=sum(tally.count for _key, tally in snapshot),
            distinct=len(snapshot),
            eligible=sum(1 for _key, tally in snapshot if tally.eligible),
            chunks=chunks,
            returned=len(ranked)
        )
        return ranked

    def submit(self, index: GridIndex, words: Iterable[Optional[str]]) -> "Future[list[str]]":
        """Run match() in the background and return a future for its result."""
        _check_stream(words)
        return self._get_dispatcher().submit(self.match, index, words)

    async def match_async(self, index: GridIndex, words: Iterable[Optional[str]]) -> list[str]:
        """Awaitable form of match() for asyncio callers."""
        return await asyncio.wrap_future(self.submit(index, words))

    def close(self) -> None:
        """Wait for submitted calls and release the dispatcher."""
        with self._dispatcher_lock:
            self._closed = True
            dispatcher, self._dispatcher = self._dispatcher, None

        if dispatcher is not None:
            dispatcher.shutdown(wait=True)

    def __enter__(self) -> "StreamMatcher":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _get_dispatcher(self) -> ThreadPoolExecutor:
        with self._dispatcher_lock:
            if self._closed:
                raise RuntimeError("StreamMatcher is closed")
            if self._dispatcher is None:
                self._dispatcher = ThreadPoolExecutor(
                    max_workers=self.max_workers,
                    thread_name_prefix="wordgrid-dispatch"
                )
            return self._dispatcher

    def _scan(self, index: GridIndex, words: Iterable[Any], table: FrequencyTable) -> int:
        """Fan the stream out over a worker pool; returns the number of chunks."""
        window = self.max_workers * 2
        submitted = 0

        with ThreadPoolExecutor(max_workers=self.max_workers,
                                thread_name_prefix="wordgrid-scan") as pool:
            pending: set[Future] = set()
            for chunk in _chunked(words, self.chunk_size):
                if len(pending) >= window:
                    done, pending = wait(pending, return_when=FIRST_COMPLETED)
                    for future in done:
                        future.result()

                pending.add(pool.submit(count_chunk, index, chunk, table))
                submitted += 1

            for future in wait(pending).done:
                future.result()

        return submitted


def match(index: GridIndex, words: Iterable[Optional[str]],
          config: Optional[WordGridConfig] = None) -> list[str]:
    """Rank the grid-present words of a stream with a one-off matcher."""
    return StreamMatcher(config).match(index, words)
