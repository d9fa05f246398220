"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass, fields
from decimal import Decimal
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import InvalidArgumentError
from .defaults import (
    DemoConfig,
    LoggerParams,
    LoggingParams,
    PaymentParams,
    ThreadingParams,
    get_default_config,
)
from .validation import ConfigValidator

SETTINGS_FILENAME = "settings.yaml"

_SECTION_TYPES = {
    "logger": LoggerParams,
    "payment": PaymentParams,
    "threading": ThreadingParams,
    "logging": LoggingParams,
}


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DemoConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_overrides(self) -> dict[str, Any]:
        """Load file-level overrides from settings.yaml, if present."""
        settings_file = self.config_dir / SETTINGS_FILENAME

        if not settings_file.exists():
            return {}

        with open(settings_file) as f:
            settings = yaml.safe_load(f)

        return settings or {}

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Explicit overrides (highest priority)
        2. settings.yaml in the config directory
        3. Built-in defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)
        config = self._deep_merge(config, self.load_overrides())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load(self, overrides: Optional[dict[str, Any]] = None) -> DemoConfig:
        """
        Merge all tiers, validate, and build a typed DemoConfig.

        Raises:
            InvalidArgumentError: If a section is not a mapping or a value
                fails validation
        """
        merged = self.merge_config(overrides)

        for section_name in _SECTION_TYPES:
            values = merged.get(section_name)
            if values is not None and not isinstance(values, dict):
                raise InvalidArgumentError(
                    f"Configuration section '{section_name}' must be a mapping",
                    argument=section_name,
                    value=values,
                )

        errors = ConfigValidator.validate_config(merged)
        if errors:
            raise InvalidArgumentError(
                "Invalid configuration: "
                + "; ".join(f"{e.field}: {e.message}" for e in errors),
                argument=errors[0].field,
                value=errors[0].value,
                context={"errors": errors},
            )

        sections = {}
        for section_name, section_type in _SECTION_TYPES.items():
            values = merged.get(section_name) or {}
            known = {f.name: f for f in fields(section_type)}
            kwargs = {}
            for key, value in values.items():
                if key not in known:
                    continue
                if key == "large_payment_threshold":
                    value = Decimal(str(value))
                kwargs[key] = value
            sections[section_name] = section_type(**kwargs)
        return DemoConfig(**sections)

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
