"""
Logging configuration and utilities for the word grid package.
"""
from .config import configure_logging, get_logger, get_subsystem_logger

__all__ = ["configure_logging", "get_logger", "get_subsystem_logger"]
