"""
Pytest Configuration

Global test configuration and fixtures for the numcheck-bench test suite.
"""

import logging

import pytest
import tempfile
from pathlib import Path

import yaml

# Add src to Python path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from numcheck.core.config import AppConfig, HarnessConfig, LoggingConfig, set_config
from numcheck.benchmark.runner import RunConfig


@pytest.fixture
def temp_dir():
    """Provide a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture(autouse=True)
def reset_global_config():
    """Drop the process-wide configuration after each test."""
    yield
    set_config(None)


@pytest.fixture
def test_config(temp_dir):
    """Provide a small, fast test configuration."""
    return AppConfig(
        name="Test numcheck-bench",
        version="0.0.1",
        debug=True,
        harness=HarnessConfig(
            value_count=1_000,
            workers=2,
            chunk_size=300,
            warmup_iterations=0,
            measurement_iterations=2,
        ),
        logging=LoggingConfig(
            level="DEBUG",
            file=str(temp_dir / "test.log")
        ),
    )


@pytest.fixture
def run_config():
    """Provide a small run configuration exercising several chunks."""
    return RunConfig(
        value_count=1_000,
        workers=3,
        chunk_size=128,
        warmup_iterations=1,
        measurement_iterations=2,
    )


@pytest.fixture
def config_file(temp_dir):
    """Write a YAML configuration with a small sweep and a temp log file."""
    config_data = {
        'app': {'name': 'CLI Test', 'version': '0.0.1'},
        'harness': {
            'value_count': 500,
            'prefixes': ['X', ''],
            'workers': 2,
            'chunk_size': 100,
            'warmup_iterations': 0,
            'measurement_iterations': 1,
        },
        'logging': {
            'level': 'DEBUG',
            'file': str(temp_dir / 'cli_test.log'),
        },
        'reporting': {
            'default_format': 'json',
            'time_unit': 'us',
            'export_path': str(temp_dir / 'reports'),
        },
    }
    path = temp_dir / 'config.yaml'
    with open(path, 'w') as f:
        yaml.safe_dump(config_data, f)
    return path


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler changes made by setup_logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
