"""Access to the Gatherer website.

``GathererAccess`` keeps a single keep-alive connection to Gatherer, so one
shared instance (``GathererAccess.instance()``) speeds things up considerably.
It also centralizes the handling of the cryptic Gatherer parameters.

Redirects are followed for as long as a 3xx response carries a ``Location``
header, up to ``settings.max_redirects`` hops. Each ``Location`` is resolved
against the URI that sent it, and every hop is fetched through the cache
under its own resolved URI. URIs on the Gatherer host are kept as
path plus query; URIs on other hosts stay absolute.
"""

import threading
from typing import Any, Callable, Hashable, Mapping, Optional
from urllib.parse import quote_plus, urljoin, urlsplit, urlunsplit

import requests

from scapeshift.cache import CacheStore
from scapeshift.config import get_configuration
from scapeshift.config import settings as settings_module
from scapeshift.config.settings import GathererSettings
from scapeshift.core.logging import get_logger
from scapeshift.errors import TooManyRedirects, TransportError

from .response import GathererResponse

logger = get_logger(__name__)

CARD_PATH = "/Pages/Card/Details.aspx"
SEARCH_PATH = "/Pages/Search/Default.aspx"
HOMEPAGE_PATH = "/Pages/Default.aspx"

# Searched as-is; each one becomes a whole AND condition wrapped as +["<term>"].
SEARCH_TEXT_OPTIONS = ("name", "format", "set")

SEARCH_ALLOWED_OPTIONS = SEARCH_TEXT_OPTIONS + ("output", "method")

CACHE_NAMESPACE = ("gatherer_access", "get")


def to_query(query: Optional[Mapping[str, Any]] = None) -> Optional[str]:
    """Convert a mapping to a URI query string, encoding its components.

    Example:
        >>> to_query({"key": "value", "name": "Jace Beleren"})
        'key=value&name=Jace+Beleren'

    Returns:
        The encoded query string, or None for an empty mapping
    """
    if not query:
        return None
    return "&".join(
        f"{quote_plus(str(key))}={quote_plus(str(value))}"
        for key, value in query.items()
    )


def decorate_search_term(value: Any) -> str:
    """Wrap a search term in Gatherer's AND-condition syntax."""
    return '+["%s"]' % value


def search_params(options: Mapping[str, Any]) -> dict:
    """Filter search options to the allowed ones and decorate text terms.

    Unrecognized or None options are dropped. The input mapping is not
    modified.
    """
    params = {
        k: v
        for k, v in options.items()
        if k in SEARCH_ALLOWED_OPTIONS and v is not None
    }
    for key in SEARCH_TEXT_OPTIONS:
        if key in params:
            params[key] = decorate_search_term(params[key])
    return params


class GathererAccess:
    """Client for the Gatherer website.

    Its request methods return a ``GathererResponse``.

    Args:
        cache: Store used for every GET. Defaults to the store of the global
            configuration, looked up on each request.
        settings: HTTP settings. Defaults to the global settings, looked up
            on each request.
        session_factory: Builds the keep-alive connection.
    """

    _instance: Optional["GathererAccess"] = None
    _instance_lock = threading.Lock()

    def __init__(
        self,
        cache: Optional[CacheStore] = None,
        settings: Optional[GathererSettings] = None,
        session_factory: Callable[[], requests.Session] = requests.Session,
    ):
        self._cache = cache
        self._settings = settings
        self.session_factory = session_factory
        self._session: Optional[requests.Session] = None
        self._lock = threading.RLock()

    @classmethod
    def instance(cls) -> "GathererAccess":
        """The process-wide client, created on first use."""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Close and forget the process-wide client."""
        with cls._instance_lock:
            if cls._instance is not None:
                cls._instance.close()
            cls._instance = None

    @property
    def settings(self) -> GathererSettings:
        if self._settings is not None:
            return self._settings
        return settings_module.settings

    @property
    def cache(self) -> CacheStore:
        if self._cache is not None:
            return self._cache
        return get_configuration().cache

    @property
    def base_url(self) -> str:
        return self.settings.base_url

    def card(self, multiverse_id) -> GathererResponse:
        """Request the details page of the card with a given multiverse ID.

        Args:
            multiverse_id: The multiverse ID to find (eg. "193871")
        """
        return self.get(CARD_PATH, {"multiverseid": multiverse_id})

    def search(
        self, options: Optional[Mapping[str, Any]] = None, **kwargs
    ) -> GathererResponse:
        """Search Gatherer.

        If exactly one card matches, Gatherer redirects to its details page
        instead of listing it, and that redirect is followed.

        The results page format is picked with the ``output`` and ``method``
        options, one of which is required for the results page to render:

        * Standard:       output="standard"
        * Compact:        output="compact"
        * Checklist:      output="checklist"
        * Text Spoiler:   output="spoiler", method="text"
        * Visual Spoiler: output="spoiler", method="visual"

        Args:
            options: Search options; merged with keyword arguments
            name: Card name to search for (eg. "Jace Beleren")
            format: Format to search for (eg. "Legacy"), block names work too
            set: Set to search for (eg. "Darksteel")
            output: Results page output (eg. "spoiler")
            method: Results page method (eg. "text")
        """
        merged = dict(options or {})
        merged.update(kwargs)
        return self.get(SEARCH_PATH, search_params(merged))

    def homepage(self) -> GathererResponse:
        """Request the homepage, which lists every format, set and card type."""
        return self.get(HOMEPAGE_PATH)

    def get(
        self, path: str, query: Optional[Mapping[str, Any]] = None
    ) -> GathererResponse:
        """GET a path through the cache, following redirects.

        Args:
            path: The path to request (eg. "/Pages/Default.aspx")
            query: Query parameters (eg. {"name": "Counterspell"})

        Raises:
            TooManyRedirects: If more than ``max_redirects`` hops are needed
            TransportError: If the underlying HTTP request fails
        """
        uri = self.resolve_uri(build_uri(path, query))
        response = self.get_with_cache(uri)

        hops = 0
        while response.is_redirect:
            hops += 1
            if hops > self.settings.max_redirects:
                raise TooManyRedirects(uri, self.settings.max_redirects)
            next_uri = self.resolve_uri(response.location, response.uri)
            logger.debug("Redirect {} -> {}", response.uri, next_uri)
            response = self.get_with_cache(next_uri)

        return response

    def resolve_uri(self, uri: str, referrer: Optional[str] = None) -> str:
        """Resolve a URI against the one that referred to it.

        Example:
            >>> access.resolve_uri("../Card/Details.aspx?multiverseid=1",
            ...                    "/Pages/Search/Default.aspx?name=x")
            '/Pages/Card/Details.aspx?multiverseid=1'
        """
        base = self.base_url + "/"
        url = urljoin(urljoin(base, referrer or ""), uri)
        scheme, netloc, path, query, _ = urlsplit(url)
        own_scheme, own_netloc = urlsplit(base)[:2]
        if (scheme, netloc) == (own_scheme, own_netloc):
            return urlunsplit(("", "", path or "/", query, ""))
        return urlunsplit((scheme, netloc, path, query, ""))

    def get_with_cache(self, uri: str) -> GathererResponse:
        """Fetch a single URI through the cache, without following redirects."""
        return self.cache.fetch(self.cache_key(uri), lambda: self._request(uri))

    @staticmethod
    def cache_key(uri: str) -> Hashable:
        return CACHE_NAMESPACE + (uri,)

    def ensure_open(self) -> requests.Session:
        """Open the keep-alive connection unless it is already open."""
        with self._lock:
            if self._session is None:
                session = self.session_factory()
                session.headers["User-Agent"] = self.settings.user_agent
                self._session = session
                logger.debug("Opened connection to {}", self.base_url)
            return self._session

    @property
    def is_open(self) -> bool:
        return self._session is not None

    def close(self) -> None:
        with self._lock:
            if self._session is not None:
                self._session.close()
                self._session = None

    def _request(self, uri: str) -> GathererResponse:
        url = urljoin(self.base_url + "/", uri)
        with self._lock:
            session = self.ensure_open()
            logger.debug("GET {}", url)
            try:
                response = session.get(
                    url,
                    allow_redirects=False,
                    timeout=(self.settings.connect_timeout, self.settings.read_timeout),
                )
            except requests.RequestException as error:
                raise TransportError(f"GET {url} failed: {error}") from error
        return GathererResponse.from_requests(response, uri)


def build_uri(path: str, query: Optional[Mapping[str, Any]] = None) -> str:
    """Join a path and its encoded query."""
    query_string = to_query(query)
    if query_string is None:
        return path
    return f"{path}?{query_string}"
