"""Settings and the process-wide configuration object."""

from .configuration import (
    Configuration,
    configure,
    get_configuration,
    reset_configuration,
)
from .settings import GathererSettings, reload_settings

__all__ = [
    "Configuration",
    "GathererSettings",
    "configure",
    "get_configuration",
    "reload_settings",
    "reset_configuration",
]
