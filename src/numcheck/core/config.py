"""
Configuration Management

Centralized configuration management with YAML file support
and environment variable overrides.
"""

import os
from pathlib import Path
from typing import Optional, Dict, Any, List
from dataclasses import dataclass, field
import yaml
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


DEFAULT_VALUE_COUNT = 10_000_000
NON_NUMERIC_PREFIX = "X"
RECOGNIZED_PREFIXES = (NON_NUMERIC_PREFIX, "")


@dataclass
class HarnessConfig:
    """Benchmark harness settings."""
    value_count: int = DEFAULT_VALUE_COUNT
    prefixes: List[str] = field(default_factory=lambda: list(RECOGNIZED_PREFIXES))
    workers: int = 4
    chunk_size: int = 250_000
    warmup_iterations: int = 1
    measurement_iterations: int = 1
    verify_totals: bool = True


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    console_level: str = "WARNING"  # Separate level for console output
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: str = "logs/numcheck.log"
    max_size: str = "10MB"
    backup_count: int = 5


@dataclass
class ReportingConfig:
    """Reporting configuration."""
    default_format: str = "terminal"
    export_path: str = "./reports"
    time_unit: str = "ms"  # Options: s, ms, us


@dataclass
class AppConfig:
    """Main application configuration."""
    name: str = "numcheck-bench"
    version: str = "1.0.0"
    environment: str = "production"
    debug: bool = False

    harness: HarnessConfig = field(default_factory=HarnessConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    reporting: ReportingConfig = field(default_factory=ReportingConfig)

    @classmethod
    def from_yaml(cls, config_path: Path) -> "AppConfig":
        """Load configuration from YAML file."""
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f) or {}

        return cls.from_dict(config_data)

    @classmethod
    def from_dict(cls, config_data: Dict[str, Any]) -> "AppConfig":
        """Build configuration from a plain dictionary."""
        # Apply environment variable overrides
        config_data = cls._apply_env_overrides(config_data)

        # Handle nested app configuration structure
        if 'app' in config_data:
            app_config = config_data.pop('app')
            # Merge app-level config into the main config
            config_data.update(app_config)

        if 'harness' in config_data and isinstance(config_data['harness'], dict):
            harness_data = config_data['harness']
            # YAML turns an empty prefix written as `- ` into None
            if 'prefixes' in harness_data:
                harness_data['prefixes'] = [
                    "" if prefix is None else str(prefix)
                    for prefix in harness_data['prefixes']
                ]
            for key in ('value_count', 'workers', 'chunk_size'):
                if key in harness_data:
                    harness_data[key] = int(harness_data[key])
            config_data['harness'] = HarnessConfig(**harness_data)

        if 'logging' in config_data and isinstance(config_data['logging'], dict):
            config_data['logging'] = LoggingConfig(**config_data['logging'])

        if 'reporting' in config_data and isinstance(config_data['reporting'], dict):
            config_data['reporting'] = ReportingConfig(**config_data['reporting'])

        if isinstance(config_data.get('debug'), str):
            config_data['debug'] = config_data['debug'].lower() in ('1', 'true', 'yes')

        return cls(**config_data)

    @staticmethod
    def _apply_env_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration."""
        env_mappings = {
            'NUMCHECK_VALUE_COUNT': ['harness', 'value_count'],
            'NUMCHECK_WORKERS': ['harness', 'workers'],
            'LOG_LEVEL': ['logging', 'level'],
            'DEBUG': ['debug'],
            'ENVIRONMENT': ['environment'],
        }

        for env_var, config_path in env_mappings.items():
            env_value = os.getenv(env_var)
            if env_value:
                current = config_data
                for key in config_path[:-1]:
                    current = current.setdefault(key, {})
                current[config_path[-1]] = env_value

        return config_data


# Global configuration instance
_config: Optional[AppConfig] = None


def get_config(config_path: Optional[Path] = None) -> AppConfig:
    """Get the application configuration instance."""
    global _config

    if _config is None:
        if config_path is None:
            # Default configuration path
            config_path = Path("config/default.yaml")

        if config_path.exists():
            _config = AppConfig.from_yaml(config_path)
        else:
            # Use default configuration if file doesn't exist
            _config = AppConfig.from_dict({})

    return _config


def set_config(config: Optional[AppConfig]) -> None:
    """Set the global configuration instance (useful for testing)."""
    global _config
    _config = config


def reload_config(config_path: Optional[Path] = None) -> AppConfig:
    """Reload configuration from file."""
    global _config
    _config = None
    return get_config(config_path)
