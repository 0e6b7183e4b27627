"""Process-wide configuration object.

Holds the cache store shared by Gatherer clients. The store is built lazily
from ``settings.cache_backend`` the first time it is needed and can be
replaced at runtime.
"""

from typing import Callable, Optional, Union

from scapeshift.cache import CacheStore, build_store

from . import settings as settings_module


class Configuration:
    """Mutable runtime configuration."""

    def __init__(self, cache: Optional[Union[CacheStore, str]] = None):
        self._cache: Optional[CacheStore] = None
        if cache is not None:
            self.cache = cache

    @property
    def cache(self) -> CacheStore:
        if self._cache is None:
            self._cache = self._default_cache()
        return self._cache

    @cache.setter
    def cache(self, value: Union[CacheStore, str]) -> None:
        if isinstance(value, str):
            self.set_cache(value)
        else:
            self._cache = value

    def set_cache(self, identifier: str, **options) -> CacheStore:
        """Replace the cache with a store resolved from its identifier.

        Example:
            >>> get_configuration().set_cache("disk", directory="/tmp/gatherer")
        """
        self._cache = build_store(identifier, **options)
        return self._cache

    @staticmethod
    def _default_cache() -> CacheStore:
        settings = settings_module.settings
        if settings.cache_backend == "disk":
            return build_store(
                "disk", directory=settings.cache_dir, expire=settings.cache_expire
            )
        return build_store(settings.cache_backend)


# Global configuration instance (lazy loaded)
_configuration: Optional[Configuration] = None


def get_configuration() -> Configuration:
    """Get global configuration instance."""
    global _configuration
    if _configuration is None:
        _configuration = Configuration()
    return _configuration


def configure(
    callback: Optional[Callable[[Configuration], None]] = None, **values
) -> Configuration:
    """Apply changes to the global configuration.

    Example:
        >>> configure(cache="null")
        >>> configure(lambda config: config.set_cache("memory", max_size=500))
    """
    configuration = get_configuration()
    for name, value in values.items():
        if not isinstance(getattr(type(configuration), name, None), property):
            raise AttributeError(f"Unknown configuration setting: {name}")
        setattr(configuration, name, value)
    if callback is not None:
        callback(configuration)
    return configuration


def reset_configuration() -> None:
    """Drop the global configuration so the next access rebuilds it."""
    global _configuration
    _configuration = None
