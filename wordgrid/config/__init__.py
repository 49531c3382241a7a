"""Configuration defaults, loading and validation."""

from .defaults import GridParams, MatchParams, WordGridConfig, get_default_config
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError

__all__ = [
    "GridParams",
    "MatchParams",
    "WordGridConfig",
    "get_default_config",
    "ConfigLoader",
    "ConfigValidator",
    "ValidationError",
]
