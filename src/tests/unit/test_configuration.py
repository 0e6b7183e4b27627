"""Unit tests for config/configuration.py"""

import pytest

from scapeshift.cache import DiskStore, MemoryStore, NullStore
from scapeshift.config import (
    Configuration,
    configure,
    get_configuration,
    reset_configuration,
)
from scapeshift.config import settings as settings_module
from scapeshift.config.settings import GathererSettings
from scapeshift.errors import ConfigurationError


def test_configuration_is_lazy_singleton():
    assert get_configuration() is get_configuration()


def test_default_cache_is_memory():
    assert isinstance(get_configuration().cache, MemoryStore)


def test_cache_is_built_once():
    configuration = Configuration()

    assert configuration.cache is configuration.cache


def test_cache_backend_from_settings(monkeypatch, tmp_path):
    monkeypatch.setattr(
        settings_module,
        "settings",
        GathererSettings(cache_backend="disk", cache_dir=tmp_path, cache_expire=60),
    )

    store = Configuration().cache

    assert isinstance(store, DiskStore)
    assert store.expire == 60
    store.close()


def test_assign_identifier():
    configuration = Configuration()
    configuration.cache = "null"

    assert isinstance(configuration.cache, NullStore)


def test_set_cache_with_options():
    store = get_configuration().set_cache("memory", max_size=50)

    assert get_configuration().cache is store
    assert store.max_size == 50


def test_configure_keywords_and_callback():
    seen = []

    configuration = configure(cache="null", callback=seen.append)

    assert isinstance(configuration.cache, NullStore)
    assert seen == [configuration]


def test_configure_rejects_unknown_setting():
    with pytest.raises(AttributeError):
        configure(colour="blue")


def test_unknown_store_identifier():
    with pytest.raises(ConfigurationError):
        configure(cache="memcached")


def test_reset_configuration():
    first = get_configuration()
    reset_configuration()

    assert get_configuration() is not first
