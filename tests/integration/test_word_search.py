"""
Integration tests: realistic puzzles and larger random streams.
"""

import random
import string
from concurrent.futures import ThreadPoolExecutor

import pytest

from wordgrid import GridIndex, StreamMatcher, build_index, match
from wordgrid.config import ConfigLoader
from wordgrid.errors import GridDefect, InvalidGridError


def _random_grid(size: int, seed: int = 42):
    rng = random.Random(seed)
    return ["".join(rng.choice(string.ascii_uppercase) for _ in range(size)) for _ in range(size)]


def _random_stream(count: int, seed: int = 42):
    rng = random.Random(seed)
    common = ["THE", "AND", "FOR", "ARE", "BUT", "NOT", "YOU", "ALL", "CAN", "HER",
              "WAS", "ONE", "OUR", "HAD", "BY", "WORD", "WHAT", "SOME", "WE", "IT"]
    words = list(common)
    while len(words) < count:
        if rng.random() < 0.3:
            words.append(rng.choice(common))
        else:
            length = rng.randint(1, 4)
            words.append("".join(rng.choice(string.ascii_uppercase) for _ in range(length)))
    return words


class TestWordSearchPuzzle:
    """Test a real word search puzzle."""

    def test_finds_puzzle_words(self, puzzle_rows):
        """Test words placed along rows and columns in both directions."""
        index = GridIndex(puzzle_rows)
        words = [
            "DIFERENCIAR", "TRATAR", "IDEAL", "PRECIO", "HORIZON",
            "CARDIO", "FORTE", "MUSCULO", "EJERCICIO", "SALUD",
            "NOTFOUND", "MISSING", "ABSENT",
        ]

        result = match(index, words)

        for word in ["DIFERENCIAR", "TRATAR", "IDEAL", "PRECIO", "HORIZON", "CARDIO"]:
            assert word in result
        for word in ["NOTFOUND", "MISSING", "ABSENT"]:
            assert word not in result
        assert result == sorted(result)

    def test_puzzle_directions(self, puzzle_rows):
        """Test the axis of individual placements."""
        index = GridIndex(puzzle_rows)

        assert index.contains("diferenciar")   # first row, right to left
        assert index.contains("tratar")        # first column, top to bottom
        assert index.contains("RATART")        # same run, bottom to top
        assert index.contains("cardio")        # last row, left to right

    def test_repeated_puzzle_words_rank_first(self, puzzle_rows):
        """Test that stream repetition drives the ranking."""
        index = GridIndex(puzzle_rows)
        words = ["IDEAL", "horizon", "HORIZON", "cardio", "ABSENT", "ABSENT", "ABSENT"]

        assert match(index, words) == ["horizon", "cardio", "IDEAL"]


class TestLargeStreams:
    """Test larger grids and streams."""

    def test_large_stream_results_are_grid_words(self):
        """Test that every ranked word is in the grid and the bound holds."""
        index = GridIndex(_random_grid(20))
        words = _random_stream(10_000)

        result = StreamMatcher().match_ranked(index, words)

        assert 0 < len(result) <= 10
        assert all(index.contains(entry.word) for entry in result)
        counts = [entry.count for entry in result]
        assert counts == sorted(counts, reverse=True)

    def test_large_stream_matches_serial_count(self):
        """Test ranking against a straightforward single-threaded count."""
        index = GridIndex(_random_grid(30))
        words = _random_stream(20_000, seed=7)

        expected_counts = {}
        for word in words:
            expected_counts[word.casefold()] = expected_counts.get(word.casefold(), 0) + 1
        eligible = [key for key in expected_counts if index.contains(key)]
        expected = sorted(eligible, key=lambda key: (-expected_counts[key], key))[:10]

        result = StreamMatcher().match(index, words)
        assert [word.casefold() for word in result] == expected

    def test_concurrent_calls_identical(self):
        """Test that ten concurrent calls on one index agree."""
        index = GridIndex(_random_grid(10))
        words = _random_stream(1000)

        with StreamMatcher() as matcher:
            futures = [matcher.submit(index, words) for _ in range(10)]
            results = [future.result() for future in futures]

        assert all(result == results[0] for result in results)

    def test_concurrent_index_builds(self):
        """Test building indexes over the same grid from several threads."""
        rows = _random_grid(16)

        with ThreadPoolExecutor(max_workers=4) as pool:
            indexes = list(pool.map(lambda _: GridIndex(rows), range(4)))

        assert all(index.row_words == indexes[0].row_words for index in indexes)
        assert all(index.col_words == indexes[0].col_words for index in indexes)


class TestConfiguredPipeline:
    """Test configuration flowing into construction and matching."""

    def test_yaml_configured_run(self, tmp_path, weather_rows):
        """Test a run driven by wordgrid.yaml."""
        (tmp_path / "wordgrid.yaml").write_text(
            "grid:\n  max_size: 8\nmatch:\n  top_n: 2\n  chunk_size: 2\n  max_workers: 3\n"
        )
        config = ConfigLoader.create(tmp_path).load()

        index = build_index(weather_rows, config)
        result = StreamMatcher(config).match(index, ["wind", "cold", "chill", "wind"])

        assert result == ["wind", "chill"]

    def test_yaml_limit_rejects_grid(self, tmp_path):
        """Test that a configured size limit rejects larger grids."""
        (tmp_path / "wordgrid.yaml").write_text("grid:\n  max_size: 4\n")
        config = ConfigLoader.create(tmp_path).load()

        with pytest.raises(InvalidGridError) as exc_info:
            build_index(_random_grid(5), config)
        assert exc_info.value.reason is GridDefect.TOO_MANY_ROWS
