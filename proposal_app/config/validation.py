"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

from .defaults import LoggingParams, OutputParams

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates runtime configuration parameters."""

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in VALID_LOG_LEVELS:
                errors.append(ValidationError(
                    field="logging.level",
                    message=f"Must be one of {', '.join(VALID_LOG_LEVELS)}",
                    value=value
                ))

        for flag in ("format_json", "include_timestamp", "include_caller"):
            if flag in params and not isinstance(params[flag], bool):
                errors.append(ValidationError(
                    field=f"logging.{flag}",
                    message="Must be a boolean",
                    value=params[flag]
                ))

        return errors

    @staticmethod
    def validate_output_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate document output parameters."""
        errors = []

        for flag in ("trailing_newline", "flush"):
            if flag in params and not isinstance(params[flag], bool):
                errors.append(ValidationError(
                    field=f"output.{flag}",
                    message="Must be a boolean",
                    value=params[flag]
                ))

        return errors

    @staticmethod
    def validate_app_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate a complete merged runtime configuration."""
        errors = []

        known_sections = {"logging", "output"}
        for section in config:
            if section not in known_sections:
                errors.append(ValidationError(
                    field=section,
                    message="Unknown configuration section",
                    value=config[section]
                ))

        for section, params_cls, validate in (
            ("logging", LoggingParams, ConfigValidator.validate_logging_params),
            ("output", OutputParams, ConfigValidator.validate_output_params),
        ):
            params = config.get(section, {})
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
                continue

            for key in params:
                if key not in params_cls.__dataclass_fields__:
                    errors.append(ValidationError(
                        field=f"{section}.{key}",
                        message="Unknown setting",
                        value=params[key]
                    ))
            errors.extend(validate(params))

        return errors
