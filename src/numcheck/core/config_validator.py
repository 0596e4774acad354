"""
Configuration Validator

Validates the loaded configuration against the harness requirements and
provides helpful error messages for each failing check.
"""

from dataclasses import asdict
from typing import Dict, Any, List

from .config import AppConfig, RECOGNIZED_PREFIXES
from .exceptions import ConfigurationError

REPORT_FORMATS = ("terminal", "markdown", "json", "csv")
TIME_UNITS = ("s", "ms", "us")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigValidator:
    """Configuration validator producing one result per named check."""

    def __init__(self):
        self.required_fields = {
            'harness': ['value_count', 'prefixes', 'workers'],
            'logging': ['level', 'file'],
            'reporting': ['default_format'],
        }

        self.field_validators = {
            'harness.value_count': self._validate_positive_int,
            'harness.workers': self._validate_positive_int,
            'harness.chunk_size': self._validate_positive_int,
            'harness.warmup_iterations': self._validate_non_negative_int,
            'harness.measurement_iterations': self._validate_positive_int,
            'logging.backup_count': self._validate_non_negative_int,
        }

    def validate(self, config: AppConfig) -> Dict[str, Dict[str, Any]]:
        """
        Run every check against a configuration.

        Args:
            config: Configuration to validate

        Returns:
            Mapping of check name to ``{'valid': bool, 'message': str}``
        """
        config_data = asdict(config)

        return {
            'required_fields': self._result(self._check_required_fields(config_data)),
            'field_values': self._result(self._validate_field_values(config_data)),
            'prefixes': self._result(self._validate_prefixes(config.harness.prefixes)),
            'logging_level': self._result(self._validate_log_levels(config)),
            'reporting': self._result(self._validate_reporting(config)),
        }

    def validate_or_raise(self, config: AppConfig) -> AppConfig:
        """
        Validate a configuration and raise on the first failing check set.

        Raises:
            ConfigurationError: If any check fails
        """
        errors = []
        for check_name, result in self.validate(config).items():
            if not result['valid']:
                errors.append(f"{check_name}: {result['message']}")

        if errors:
            error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {error}" for error in errors)
            raise ConfigurationError(error_msg)

        return config

    @staticmethod
    def _result(errors: List[str]) -> Dict[str, Any]:
        if errors:
            return {'valid': False, 'message': "; ".join(errors)}
        return {'valid': True, 'message': "OK"}

    def _check_required_fields(self, config_data: Dict[str, Any]) -> List[str]:
        """Check for required configuration fields."""
        errors = []

        for section, fields in self.required_fields.items():
            section_data = config_data.get(section)
            if not isinstance(section_data, dict):
                errors.append(f"Missing required section: {section}")
                continue

            for field_name in fields:
                if section_data.get(field_name) is None:
                    errors.append(f"Missing required field: {section}.{field_name}")

        return errors

    def _validate_field_values(self, config_data: Dict[str, Any]) -> List[str]:
        """Validate numeric fields."""
        errors = []

        for path, validator in self.field_validators.items():
            section, key = path.split('.')
            value = config_data.get(section, {}).get(key)
            try:
                validator(value)
            except ValueError as e:
                errors.append(f"Invalid value for {path}: {e}")

        return errors

    def _validate_prefixes(self, prefixes: List[str]) -> List[str]:
        if not prefixes:
            return ["At least one prefix is required"]
        unknown = [p for p in prefixes if p not in RECOGNIZED_PREFIXES]
        if unknown:
            return [f"Unrecognized prefixes {unknown!r}; expected values from {list(RECOGNIZED_PREFIXES)!r}"]
        return []

    def _validate_log_levels(self, config: AppConfig) -> List[str]:
        errors = []
        for name in ('level', 'console_level'):
            value = getattr(config.logging, name)
            if str(value).upper() not in LOG_LEVELS:
                errors.append(f"logging.{name} must be one of {', '.join(LOG_LEVELS)}")
        return errors

    def _validate_reporting(self, config: AppConfig) -> List[str]:
        errors = []
        if config.reporting.default_format not in REPORT_FORMATS:
            errors.append(f"reporting.default_format must be one of {', '.join(REPORT_FORMATS)}")
        if config.reporting.time_unit not in TIME_UNITS:
            errors.append(f"reporting.time_unit must be one of {', '.join(TIME_UNITS)}")
        return errors

    def _validate_positive_int(self, value: Any) -> None:
        """Validate positive integer."""
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ValueError("Must be a positive integer")

    def _validate_non_negative_int(self, value: Any) -> None:
        """Validate non-negative integer."""
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValueError("Must be a non-negative integer")
