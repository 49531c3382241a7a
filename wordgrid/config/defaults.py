"""Default configuration parameters for grid indexing and stream matching."""

import os
from dataclasses import dataclass, field

# Hard upper bound on grid dimension; configuration may only lower it.
MAX_GRID_SIZE = 64


def _default_workers() -> int:
    return min(8, os.cpu_count() or 1)


@dataclass(frozen=True)
class GridParams:
    """Grid validation parameters."""
    max_size: int = MAX_GRID_SIZE                    # Max rows and max row length


@dataclass(frozen=True)
class MatchParams:
    """Stream matching parameters."""
    top_n: int = 10                                  # Ranked words returned per call
    max_workers: int = field(default_factory=_default_workers)
    chunk_size: int = 1024                           # Stream items per unit of work


@dataclass(frozen=True)
class WordGridConfig:
    """Complete configuration."""
    grid: GridParams
    match: MatchParams


def get_default_config() -> WordGridConfig:
    """Get the default configuration instance."""
    return WordGridConfig(
        grid=GridParams(),
        match=MatchParams(),
    )
