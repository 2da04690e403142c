"""Root pytest configuration for test discovery and auto-skip behavior.

All tests are collected, but tests that need Docker (Testcontainers
PostgreSQL) are auto-skipped unless explicitly enabled.

Test Structure:
    tests/
    ├── unit/              # Fast, isolated tests (mocks, in-memory SQLite)
    ├── integration/
    │   ├── api/           # HTTP surface via TestClient + file-based SQLite
    │   └── persistence/   # Repository against Testcontainers PostgreSQL
    └── shared/            # Shared fixtures and utilities

Environment Variables:
    RUN_INTEGRATION=1    Run @pytest.mark.integration tests
    RUN_ALL_TESTS=1      Run all tests (overrides other settings)

Pytest Options:
    --run-integration    Run integration tests
    --run-all            Run all tests
"""

import os

import pytest
from pydantic import SecretStr

from userhub_config import Settings, clear_settings_cache

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only"  # NOQA: S105


def _flag_enabled(name: str) -> bool:
    return os.environ.get(name, "").lower() in ("1", "true", "yes")


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.integration",
    )
    parser.addoption(
        "--run-all",
        action="store_true",
        default=False,
        help="Run all tests regardless of markers",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that need a real PostgreSQL via Docker (auto-skipped)",
    )
    config.addinivalue_line(
        "markers",
        "slow: Tests that take more than 1 second",
    )


def pytest_collection_modifyitems(config, items):
    """Auto-skip tests based on markers unless explicitly enabled."""
    if config.getoption("--run-all") or _flag_enabled("RUN_ALL_TESTS"):
        return  # Don't skip anything

    run_integration = config.getoption("--run-integration") or _flag_enabled(
        "RUN_INTEGRATION",
    )

    skip_integration = pytest.mark.skip(
        reason="Integration test - run with --run-integration or RUN_INTEGRATION=1",
    )

    for item in items:
        # Explicit marker only, not folder name
        item_markers = {mark.name for mark in item.iter_markers()}
        if not run_integration and "integration" in item_markers:
            item.add_marker(skip_integration)


@pytest.fixture(autouse=True)
def isolate_settings_cache():
    """Ensure no test sees settings cached by another test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def make_settings():
    """Build Settings for tests with fast hashing and a throwaway secret."""

    def _make(**overrides) -> Settings:
        values = {
            "jwt_secret_key": SecretStr(TEST_JWT_SECRET),
            "app_env": "testing",
            "bcrypt_rounds": 4,  # Low rounds for fast tests
            "redis_enabled": False,
            "smtp_enabled": False,
            "log_level": "WARNING",
        }
        values.update(overrides)
        return Settings(**values)

    return _make
