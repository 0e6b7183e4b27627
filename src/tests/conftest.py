"""Shared fixtures: a scripted stand-in for the keep-alive session."""

import pytest
import requests
from loguru import logger
from requests.structures import CaseInsensitiveDict

from scapeshift.cache import MemoryStore
from scapeshift.config import reset_configuration
from scapeshift.config.settings import GathererSettings
from scapeshift.net import GathererAccess

BASE = "http://gatherer.wizards.com"


def make_response(url, status=200, headers=None, body=b""):
    response = requests.Response()
    response.status_code = status
    response.headers = CaseInsensitiveDict(headers or {})
    response._content = body
    response.encoding = "utf-8"
    response.url = url
    return response


class FakeSession:
    """Serves canned responses keyed by absolute URL and records every GET."""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []
        self.headers = {}
        self.closed = False

    def route(self, url, status=200, headers=None, body=b""):
        self.routes[url] = (status, headers, body)

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if url not in self.routes:
            return make_response(url, status=404, body=b"Not Found")
        route = self.routes[url]
        if isinstance(route, Exception):
            raise route
        status, headers, body = route
        return make_response(url, status, headers, body)

    def close(self):
        self.closed = True


class SessionFactory:
    """Hands out one FakeSession and counts how often it was asked to."""

    def __init__(self, session):
        self.session = session
        self.created = 0

    def __call__(self):
        self.created += 1
        return self.session


@pytest.fixture(autouse=True)
def reset_globals():
    GathererAccess.reset_instance()
    reset_configuration()
    yield
    GathererAccess.reset_instance()
    reset_configuration()


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def session_factory(session):
    return SessionFactory(session)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def access(store, session_factory):
    return GathererAccess(
        cache=store,
        settings=GathererSettings(max_redirects=3),
        session_factory=session_factory,
    )


@pytest.fixture
def quiet_logs():
    yield
    logger.remove()
