"""HTTP access to the Gatherer website."""

from .gatherer_access import (
    CARD_PATH,
    HOMEPAGE_PATH,
    SEARCH_ALLOWED_OPTIONS,
    SEARCH_PATH,
    SEARCH_TEXT_OPTIONS,
    GathererAccess,
    build_uri,
    search_params,
    to_query,
)
from .response import GathererResponse

__all__ = [
    "CARD_PATH",
    "HOMEPAGE_PATH",
    "SEARCH_ALLOWED_OPTIONS",
    "SEARCH_PATH",
    "SEARCH_TEXT_OPTIONS",
    "GathererAccess",
    "GathererResponse",
    "build_uri",
    "search_params",
    "to_query",
]
