"""Grid indexing: validation and precomputed straight-line membership."""

from .grid_index import Axis, GridIndex, build_index, extract_runs, fold, validate_grid

__all__ = [
    "Axis",
    "GridIndex",
    "build_index",
    "extract_runs",
    "fold",
    "validate_grid",
]
