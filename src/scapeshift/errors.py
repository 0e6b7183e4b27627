"""Exception hierarchy for scapeshift.

Provides structured error handling with specific exception types
for the failure modes of talking to Gatherer.
"""


class GathererError(Exception):
    """Base exception for all scapeshift errors.

    All custom exceptions inherit from this base class for easy catching.
    """

    pass


class TransportError(GathererError):
    """Network-related errors (connection refused, DNS, timeouts)."""

    pass


class RedirectError(GathererError):
    """Redirect-following errors."""

    pass


class TooManyRedirects(RedirectError):
    """Raised when a redirect chain is longer than the configured limit."""

    def __init__(self, uri: str, limit: int):
        super().__init__(f"Exceeded {limit} redirects while fetching {uri}")
        self.uri = uri
        self.limit = limit


class ConfigurationError(GathererError):
    """Configuration errors (unknown cache store, invalid settings)."""

    pass
