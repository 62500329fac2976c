"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/            # Fast, isolated tests (mocks, no database)
    └── integration/     # SQLite-backed repository, API and CLI tests

Settings are read from config/.env.dev when present. A throwaway JWT
secret and the minimum bcrypt work factor are set as defaults so the
suite runs without any local configuration.
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from bluevelvet_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.dev for tests (same as local development)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")

os.environ.setdefault("JWT_SECRET_KEY", "test-jwt-secret-for-testing-only")
os.environ.setdefault("BCRYPT_ROUNDS", "4")


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "slow: Tests that take more than 1 second",
    )


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Make every test session start from freshly loaded settings."""
    clear_settings_cache()
    yield
    clear_settings_cache()
