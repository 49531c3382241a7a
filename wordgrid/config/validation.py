"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from typing import Any

from .defaults import MAX_GRID_SIZE, GridParams, MatchParams

_SECTIONS = {"grid": GridParams, "match": MatchParams}


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_int(value: Any) -> bool:
    # bool is an int subclass but never a valid count
    return isinstance(value, int) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_grid_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate grid parameters."""
        errors = []

        if "max_size" in params:
            value = params["max_size"]
            if not _is_int(value) or value < 1 or value > MAX_GRID_SIZE:
                errors.append(ValidationError(
                    field="max_size",
                    message=f"Must be an integer between 1 and {MAX_GRID_SIZE}",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_match_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate stream matching parameters."""
        errors = []

        for name in ("top_n", "max_workers", "chunk_size"):
            if name in params:
                value = params[name]
                if not _is_int(value) or value <= 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a positive integer",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_section_shape(section: str, params: Any) -> list[ValidationError]:
        """Reject sections that are not mappings or that name unknown parameters."""
        if not isinstance(params, dict):
            return [ValidationError(field=section, message="Must be a mapping", value=params)]

        known = {f.name for f in fields(_SECTIONS[section])}
        return [
            ValidationError(field=f"{section}.{name}", message="Unknown parameter", value=value)
            for name, value in params.items()
            if name not in known
        ]

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for section in _SECTIONS:
            if section in config:
                errors.extend(ConfigValidator.validate_section_shape(section, config[section]))
        if errors:
            return errors

        if "grid" in config:
            errors.extend(ConfigValidator.validate_grid_params(config["grid"]))

        if "match" in config:
            errors.extend(ConfigValidator.validate_match_params(config["match"]))

        return errors
