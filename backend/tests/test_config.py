"""
Tests for environment configuration loading.
"""

import os
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest

from charter.utils import config as config_module
from charter.utils.config import (
    DEFAULT_AIRPORTS_FILE,
    CharterConfig,
    get_config,
    load_config,
    reset_config,
    to_naive_utc,
    utcnow,
)


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


class TestLoadConfig:

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self, tmp_path):
        config = load_config(str(tmp_path / "missing.env"))

        assert config.database_url is None
        assert config.airports_file == str(DEFAULT_AIRPORTS_FILE)
        assert config.airport_search_limit == 10
        assert config.api_host == "127.0.0.1"
        assert config.api_port == 8000
        assert config.debug is False
        assert config.log_level == "INFO"

    @patch.dict(os.environ, {
        "DATABASE_URL": "sqlite:///:memory:",
        "AIRPORTS_FILE": "/srv/charter/airports.dat",
        "AIRPORT_SEARCH_LIMIT": "25",
        "API_PORT": "9000",
        "CHARTER_DEBUG": "yes",
        "CHARTER_LOG_LEVEL": "debug",
    }, clear=True)
    def test_environment_overrides(self, tmp_path):
        config = load_config(str(tmp_path / "missing.env"))

        assert config.database_url == "sqlite:///:memory:"
        assert config.airports_file == "/srv/charter/airports.dat"
        assert config.airport_search_limit == 25
        assert config.api_port == 9000
        assert config.debug is True
        assert config.log_level == "DEBUG"

    @patch.dict(os.environ, {}, clear=True)
    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("AIRPORT_SEARCH_LIMIT=5\nCHARTER_LOG_LEVEL=WARNING\n")

        config = load_config(str(env_file))
        assert config.airport_search_limit == 5
        assert config.log_level == "WARNING"

    @patch.dict(os.environ, {"CHARTER_LOG_LEVEL": "LOUD"}, clear=True)
    def test_invalid_log_level(self, tmp_path):
        with pytest.raises(ValueError, match="Configuration validation failed"):
            load_config(str(tmp_path / "missing.env"))

    @patch.dict(os.environ, {"AIRPORT_SEARCH_LIMIT": "0"}, clear=True)
    def test_search_limit_bounds(self, tmp_path):
        with pytest.raises(ValueError):
            load_config(str(tmp_path / "missing.env"))

    def test_get_config_is_cached(self):
        with patch.object(config_module, "load_config", return_value=CharterConfig()) as loader:
            first = get_config()
            second = get_config()

        assert first is second
        loader.assert_called_once()


class TestTimestamps:

    def test_utcnow_is_naive(self):
        now = utcnow()
        assert now.tzinfo is None
        assert abs(datetime.now(timezone.utc).replace(tzinfo=None) - now) < timedelta(seconds=5)

    def test_aware_converted_to_utc(self):
        aware = datetime(2025, 7, 1, 5, 0, tzinfo=timezone(timedelta(hours=-4)))
        assert to_naive_utc(aware) == datetime(2025, 7, 1, 9, 0)

    def test_naive_and_none_pass_through(self):
        naive = datetime(2025, 7, 1, 9, 0)
        assert to_naive_utc(naive) is naive
        assert to_naive_utc(None) is None

