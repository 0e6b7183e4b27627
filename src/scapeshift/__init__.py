"""
scapeshift - access layer for the Gatherer card database.

Builds Gatherer query URLs, fetches them over a shared keep-alive
connection, follows redirects and caches every response.
"""

__version__ = "1.2.0"
