"""Configuration validation utilities."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_logger_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate singleton logger parameters."""
        errors = []

        if "timestamp_format" in params:
            value = params["timestamp_format"]
            if not isinstance(value, str) or not value.strip():
                errors.append(ValidationError(
                    field="timestamp_format",
                    message="Must be a non-empty strftime format string",
                    value=value
                ))
            else:
                try:
                    datetime(2000, 1, 1).strftime(value)
                except ValueError:
                    errors.append(ValidationError(
                        field="timestamp_format",
                        message="Must be a valid strftime format string",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_payment_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate payment service parameters."""
        errors = []

        if "large_payment_threshold" in params:
            value = params["large_payment_threshold"]
            try:
                threshold = Decimal(str(value))
            except InvalidOperation:
                threshold = None
            if isinstance(value, bool) or threshold is None or not threshold.is_finite() or threshold <= 0:
                errors.append(ValidationError(
                    field="large_payment_threshold",
                    message="Must be a positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_threading_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate concurrent access test parameters."""
        errors = []

        if "thread_count" in params:
            value = params["thread_count"]
            if isinstance(value, bool) or not isinstance(value, int) or value < 2:
                errors.append(ValidationError(
                    field="thread_count",
                    message="Must be an integer of at least 2",
                    value=value
                ))

        if "hold_seconds" in params:
            value = params["hold_seconds"]
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
                errors.append(ValidationError(
                    field="hold_seconds",
                    message="Must be a non-negative number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate diagnostic logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in VALID_LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(VALID_LOG_LEVELS)}",
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

    @classmethod
    def validate_config(cls, config: dict[str, Any]) -> list[ValidationError]:
        """Validate a complete merged configuration dictionary."""
        errors = []

        if "logger" in config:
            errors.extend(cls.validate_logger_params(config["logger"]))
        if "payment" in config:
            errors.extend(cls.validate_payment_params(config["payment"]))
        if "threading" in config:
            errors.extend(cls.validate_threading_params(config["threading"]))
        if "logging" in config:
            errors.extend(cls.validate_logging_params(config["logging"]))

        return errors
