"""Configuration error classification."""

from typing import TYPE_CHECKING, Optional

from .grid_errors import WordGridError

if TYPE_CHECKING:
    from ..config.validation import ValidationError


class ConfigurationError(WordGridError):
    """Merged configuration failed validation."""

    def __init__(self, message: str, errors: Optional[list["ValidationError"]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
