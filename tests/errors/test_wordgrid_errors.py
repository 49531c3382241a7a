"""
Error classification tests for grid construction and stream matching.
"""

import pytest

from wordgrid import GridIndex, match
from wordgrid.config import ValidationError
from wordgrid.errors import (
    ConfigurationError,
    GridDefect,
    InvalidArgumentError,
    InvalidGridError,
    WordGridError,
)


class TestErrorClassification:
    """Test error classification system."""

    def test_base_error(self):
        """Test the base error carries message and context."""
        error = WordGridError("base error")
        assert error.message == "base error"
        assert error.context == {}

    def test_invalid_grid_error(self):
        """Test grid errors carry reason and dimensions."""
        error = InvalidGridError(GridDefect.NOT_SQUARE, row_count=3, row_length=5)

        assert isinstance(error, WordGridError)
        assert str(error) == "Invalid grid: not square"
        assert error.reason is GridDefect.NOT_SQUARE
        assert error.row_count == 3
        assert error.row_length == 5

    def test_grid_defect_messages(self):
        """Test the reason strings for each defect."""
        assert [defect.value for defect in GridDefect] == [
            "empty",
            "too large (rows)",
            "too large (row length)",
            "ragged rows",
            "not square",
        ]

    def test_invalid_argument_error(self):
        """Test argument errors are also ValueErrors."""
        error = InvalidArgumentError("missing", argument="words", context={"call": "match"})

        assert isinstance(error, WordGridError)
        assert isinstance(error, ValueError)
        assert error.argument == "words"
        assert error.context == {"call": "match"}

    def test_configuration_error(self):
        """Test configuration errors carry the validation records."""
        record = ValidationError(field="top_n", message="Must be a positive integer", value=0)
        error = ConfigurationError("bad config", errors=[record])

        assert isinstance(error, WordGridError)
        assert error.errors == [record]
        assert ConfigurationError("bad config").errors == []


class TestErrorPropagation:
    """Test that failures surface to the direct caller."""

    def test_no_partial_index(self):
        """Test that a failed construction yields no index object."""
        index = None
        with pytest.raises(InvalidGridError):
            index = GridIndex(["abc", "de"])
        assert index is None

    def test_catch_as_package_error(self):
        """Test a single except clause covers both construction and query errors."""
        for call in (lambda: GridIndex([]), lambda: match(GridIndex(["a"]), None)):
            with pytest.raises(WordGridError):
                call()

    def test_invalid_items_are_not_errors(self):
        """Test that malformed stream items never raise."""
        assert match(GridIndex(["a"]), [None, "", b"a", 1.5, "A"]) == ["A"]
