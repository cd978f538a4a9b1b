"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_ledger_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate ledger parameters."""
        errors = []

        # Validate settlement_threshold
        if "settlement_threshold" in params:
            value = params["settlement_threshold"]
            if not _is_number(value) or value <= 0 or value >= 1:
                errors.append(ValidationError(
                    field="settlement_threshold",
                    message="Must be a positive number below 1",
                    value=value
                ))

        # Validate currency_precision
        if "currency_precision" in params:
            value = params["currency_precision"]
            if not isinstance(value, int) or isinstance(value, bool) or value < 0 or value > 6:
                errors.append(ValidationError(
                    field="currency_precision",
                    message="Must be an integer between 0 and 6",
                    value=value
                ))

        # Validate zero_sum_tolerance
        if "zero_sum_tolerance" in params:
            value = params["zero_sum_tolerance"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="zero_sum_tolerance",
                    message="Must be a positive number",
                    value=value
                ))

        # Validate require_uniform_currency
        if "require_uniform_currency" in params:
            value = params["require_uniform_currency"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="require_uniform_currency",
                    message="Must be a boolean",
                    value=value
                ))

        # Validate default_currency
        if "default_currency" in params:
            value = params["default_currency"]
            if not isinstance(value, str) or len(value) != 3 or not value.isalpha():
                errors.append(ValidationError(
                    field="default_currency",
                    message="Must be a 3-letter currency code",
                    value=value
                ))

        # Validate progress_cap_pct
        if "progress_cap_pct" in params:
            value = params["progress_cap_pct"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="progress_cap_pct",
                    message="Must be a positive number",
                    value=value
                ))

        # Validate default_category
        if "default_category" in params:
            value = params["default_category"]
            if not isinstance(value, str) or not value.strip():
                errors.append(ValidationError(
                    field="default_category",
                    message="Must be a non-empty string",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in _LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {sorted(_LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="format_json",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "ledger" in config:
            errors.extend(ConfigValidator.validate_ledger_params(config["ledger"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
