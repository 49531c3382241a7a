"""Pytest configuration and shared fixtures."""

import pytest
from typing import List

from wordgrid import GridIndex


@pytest.fixture
def weather_rows() -> List[str]:
    """Square grid holding the words chill, cold and wind along its rows."""
    return ["chill", "coldw", "windx", "aaaaa", "bbbbb"]


@pytest.fixture
def weather_index(weather_rows: List[str]) -> GridIndex:
    """Index over the weather grid."""
    return GridIndex(weather_rows)


@pytest.fixture
def letter_rows() -> List[str]:
    """5x5 grid of distinct letters a..y."""
    return ["abcde", "fghij", "klmno", "pqrst", "uvwxy"]


@pytest.fixture
def letter_index(letter_rows: List[str]) -> GridIndex:
    """Index over the letter grid."""
    return GridIndex(letter_rows)


@pytest.fixture
def puzzle_rows() -> List[str]:
    """13x13 word search puzzle with Spanish words across rows and columns."""
    return [
        "RAICNEREFIDTM",
        "CCZERTSDVQBMO",
        "ASTIZEZKLDMAC",
        "JNLQCZFAJFUFO",
        "TICTRATIDEALN",
        "RPULCJRPRECIO",
        "ARECCCHORIZOI",
        "THNCUIUMCUUNM",
        "ATTWETLBKBTEM",
        "RPIHROUADAOAN",
        "UUSRDINTQGWCT",
        "NITSOPHORIZON",
        "QYAKSFCARDIOK",
    ]
