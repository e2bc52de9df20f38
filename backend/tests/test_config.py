"""Tests for environment-driven settings."""

import pytest

from quickconvert.config import ConfigurationError, get_settings, load_settings


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("decimal_places", "DECIMAL_PLACES", "QUICKCONVERT_DECIMAL_PLACES", "QUICKCONVERT_DEBUG"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestDecimalPlaces:
    def test_from_environment(self, clean_env):
        clean_env.setenv("decimal_places", "3")
        assert load_settings().decimal_places == 3

    def test_prefixed_variable(self, clean_env):
        clean_env.setenv("QUICKCONVERT_DECIMAL_PLACES", "4")
        assert load_settings().decimal_places == 4

    def test_explicit_value(self, clean_env):
        assert load_settings(decimal_places=1).decimal_places == 1

    def test_missing(self, clean_env):
        with pytest.raises(ConfigurationError, match="decimal_places"):
            load_settings()

    @pytest.mark.parametrize("raw", ["two", "1.5", "-1", ""])
    def test_invalid(self, clean_env, raw):
        clean_env.setenv("decimal_places", raw)
        with pytest.raises(ConfigurationError):
            load_settings()

    def test_no_upper_bound(self, clean_env):
        clean_env.setenv("decimal_places", "25")
        assert load_settings().decimal_places == 25


class TestOtherSettings:
    def test_defaults(self, clean_env):
        settings = load_settings(decimal_places=2)
        assert settings.debug is False
        assert settings.host == "127.0.0.1"
        assert settings.port == 0

    def test_debug_flag(self, clean_env):
        clean_env.setenv("QUICKCONVERT_DEBUG", "true")
        assert load_settings(decimal_places=2).debug is True


class TestCachedSettings:
    def test_loaded_once(self, clean_env):
        clean_env.setenv("decimal_places", "2")
        first = get_settings()
        clean_env.setenv("decimal_places", "5")
        assert get_settings() is first
        assert get_settings().decimal_places == 2
