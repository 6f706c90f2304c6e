"""Unit tests for client configuration."""

import json

import pytest

from fpl_live.config import clear_config_cache, get_config
from fpl_live.constants import FPL_BASE_URL


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Isolate each test from the config cache and environment."""
    monkeypatch.delenv('FPL_LIVE_CONFIG', raising=False)
    clear_config_cache()
    yield
    clear_config_cache()


def write_config(tmp_path, data) -> str:
    path = tmp_path / 'fpl_live.json'
    path.write_text(json.dumps(data), encoding='utf-8')
    return str(path)


class TestGetConfig:
    """Tests for loading configuration."""

    def test_defaults(self):
        """Test built-in defaults are used without a config file."""
        config = get_config()
        assert config.base_url == FPL_BASE_URL
        assert config.mini_league_max_entries == 50
        assert config.escape_timeout == 0.25

    def test_load_from_path(self, tmp_path):
        """Test values are read from a JSON file."""
        path = write_config(tmp_path, {'mini_league_max_entries': 20, 'request_timeout': 2})
        config = get_config(path)
        assert config.mini_league_max_entries == 20
        assert config.request_timeout == 2.0
        assert config.base_url == FPL_BASE_URL

    def test_load_from_environment(self, tmp_path, monkeypatch):
        """Test FPL_LIVE_CONFIG names the config file."""
        path = write_config(tmp_path, {'user_agent': 'my-agent'})
        monkeypatch.setenv('FPL_LIVE_CONFIG', path)
        assert get_config().user_agent == 'my-agent'

    def test_config_is_cached(self, tmp_path):
        """Test the same path returns the cached object until cleared."""
        path = write_config(tmp_path, {})
        first = get_config(path)
        assert get_config(path) is first
        clear_config_cache()
        assert get_config(path) is not first

    def test_missing_file(self, tmp_path):
        """Test a named but missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            get_config(str(tmp_path / 'missing.json'))

    def test_unknown_key_rejected(self, tmp_path):
        """Test unknown settings fail validation."""
        path = write_config(tmp_path, {'max_entries': 20})
        with pytest.raises(ValueError, match='Schema validation failed'):
            get_config(path)

    def test_standings_page_not_configurable(self, tmp_path):
        """Test mini leagues are always judged on the first standings page."""
        path = write_config(tmp_path, {'standings_page': 2})
        with pytest.raises(ValueError, match='Schema validation failed'):
            get_config(path)

    def test_bad_base_url_rejected(self, tmp_path):
        """Test a non-http base URL fails validation."""
        path = write_config(tmp_path, {'base_url': 'ftp://example.com'})
        with pytest.raises(ValueError):
            get_config(path)
