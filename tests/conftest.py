"""
Pytest configuration and shared fixtures for the session client tests.

Puts ``src/`` on the path, switches the environment to ``test`` and installs
a quiet logging configuration before any logger is created.
"""

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT))
sys.path.insert(0, str(ROOT / "src"))

os.environ['ENVIRONMENT'] = 'test'

from config.structs import Credentials
from infrastructure.logging import get_logger
from infrastructure.logging.factory import LoggerFactory
from infrastructure.logging.structs import (
    LoggingConfig, ConsoleBackendConfig, PerformanceConfig, RouterConfig
)


@pytest.fixture(scope="session", autouse=True)
def setup_test_logging():
    """Set up test-appropriate logging configuration."""
    LoggerFactory.clear_cache()
    LoggerFactory._default_config = LoggingConfig(
        environment="test",
        console=ConsoleBackendConfig(enabled=True, min_level="WARNING", color=False),
        performance=PerformanceConfig(buffer_size=100, batch_size=1, dispatch_interval=0.001),
        router=RouterConfig(default_backends=["console"])
    )


@pytest.fixture
def logger():
    """Provide HFT logger for tests."""
    return get_logger("test.cryptocom")


@pytest.fixture
def credentials():
    return Credentials(api_key="test-api-key", secret_key="test-secret-key")
