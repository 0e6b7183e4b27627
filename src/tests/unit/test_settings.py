"""Unit tests for config/settings.py"""

import pytest

from scapeshift.config.settings import GathererSettings, reload_settings


def test_settings_defaults(monkeypatch):
    for name in ("GATHERER_HOST", "GATHERER_MAX_REDIRECTS", "GATHERER_CACHE_BACKEND"):
        monkeypatch.delenv(name, raising=False)

    settings = GathererSettings()

    assert settings.host == "gatherer.wizards.com"
    assert settings.base_url == "http://gatherer.wizards.com"
    assert settings.max_redirects == 10
    assert settings.cache_backend == "memory"
    assert settings.cache_expire is None


def test_settings_env_var_override(monkeypatch):
    monkeypatch.setenv("GATHERER_MAX_REDIRECTS", "4")
    monkeypatch.setenv("GATHERER_CACHE_BACKEND", "null")
    monkeypatch.setenv("GATHERER_LOG_LEVEL", "DEBUG")

    settings = reload_settings()

    assert settings.max_redirects == 4
    assert settings.cache_backend == "null"
    assert settings.log_level == "DEBUG"

    monkeypatch.undo()
    reload_settings()


def test_host_is_normalized():
    settings = GathererSettings(host="https://gatherer.wizards.com/", scheme="https")

    assert settings.host == "gatherer.wizards.com"
    assert settings.base_url == "https://gatherer.wizards.com"


def test_settings_validation():
    with pytest.raises(Exception):  # Pydantic ValidationError
        GathererSettings(max_redirects=0)

    with pytest.raises(Exception):  # Pydantic ValidationError
        GathererSettings(cache_backend="redis")

    with pytest.raises(Exception):  # Pydantic ValidationError
        GathererSettings(read_timeout=-1)
