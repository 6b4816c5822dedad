"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

from .defaults import LoggingParams, MachineParams

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        for name in ("format_json", "include_timestamp", "include_caller"):
            if name in params and not isinstance(params[name], bool):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a boolean",
                    value=params[name]
                ))

        errors.extend(ConfigValidator._unknown_keys(params, LoggingParams.__dataclass_fields__))
        return errors

    @staticmethod
    def validate_machine_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate machine parameters."""
        errors = []

        for name in ("log_ticks", "log_transitions"):
            if name in params and not isinstance(params[name], bool):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a boolean",
                    value=params[name]
                ))

        errors.extend(ConfigValidator._unknown_keys(params, MachineParams.__dataclass_fields__))
        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        sections = {
            "logging": ConfigValidator.validate_logging_params,
            "machine": ConfigValidator.validate_machine_params,
        }

        for section, validate in sections.items():
            if section not in config:
                continue
            params = config[section]
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
                continue
            for error in validate(params):
                errors.append(ValidationError(
                    field=f"{section}.{error.field}",
                    message=error.message,
                    value=error.value
                ))

        errors.extend(ConfigValidator._unknown_keys(config, sections))
        return errors

    @staticmethod
    def _unknown_keys(params: dict[str, Any], known: Any) -> list[ValidationError]:
        return [
            ValidationError(field=key, message="Unknown parameter", value=params[key])
            for key in params
            if key not in known
        ]
