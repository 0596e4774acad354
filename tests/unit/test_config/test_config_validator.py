"""
Unit tests for ConfigValidator.
"""

import pytest

from numcheck.core.config import AppConfig, HarnessConfig, ReportingConfig
from numcheck.core.config_validator import ConfigValidator
from numcheck.core.exceptions import ConfigurationError


class TestConfigValidator:
    """Test cases for ConfigValidator."""

    def setup_method(self):
        """Setup test fixtures."""
        self.validator = ConfigValidator()

    def test_default_config_is_valid(self):
        results = self.validator.validate(AppConfig())
        assert all(result['valid'] for result in results.values())
        assert set(results) == {'required_fields', 'field_values', 'prefixes', 'logging_level', 'reporting'}

    def test_non_positive_value_count(self):
        config = AppConfig(harness=HarnessConfig(value_count=0))
        results = self.validator.validate(config)

        assert results['field_values']['valid'] is False
        assert "harness.value_count" in results['field_values']['message']

    def test_zero_warmup_allowed(self):
        config = AppConfig(harness=HarnessConfig(warmup_iterations=0))
        assert self.validator.validate(config)['field_values']['valid'] is True

    def test_unknown_prefix(self):
        config = AppConfig(harness=HarnessConfig(prefixes=["X", "Y"]))
        results = self.validator.validate(config)

        assert results['prefixes']['valid'] is False
        assert "'Y'" in results['prefixes']['message']

    def test_no_prefixes(self):
        config = AppConfig(harness=HarnessConfig(prefixes=[]))
        assert self.validator.validate(config)['prefixes']['valid'] is False

    def test_bad_report_format(self):
        config = AppConfig(reporting=ReportingConfig(default_format="html", time_unit="ns"))
        result = self.validator.validate(config)['reporting']

        assert result['valid'] is False
        assert "default_format" in result['message']
        assert "time_unit" in result['message']

    def test_bad_log_level(self):
        config = AppConfig()
        config.logging.level = "LOUD"
        assert self.validator.validate(config)['logging_level']['valid'] is False

    def test_validate_or_raise(self):
        config = AppConfig(harness=HarnessConfig(workers=0))
        with pytest.raises(ConfigurationError, match="Configuration validation failed"):
            self.validator.validate_or_raise(config)

    def test_validate_or_raise_returns_config(self):
        config = AppConfig()
        assert self.validator.validate_or_raise(config) is config
