"""Unit tests for net/response.py"""

import pickle

import pytest

from scapeshift.net import GathererResponse


@pytest.mark.parametrize(
    "status, headers, expected",
    [
        (302, {"Location": "/b"}, True),
        (301, {"location": "/b"}, True),
        (304, {}, False),
        (200, {"Location": "/b"}, False),
        (302, {"Location": ""}, False),
    ],
)
def test_is_redirect(status, headers, expected):
    assert GathererResponse(status, headers).is_redirect is expected


def test_text_and_ok():
    response = GathererResponse(200, {}, "Æther Vial".encode("utf-8"))

    assert response.ok
    assert response.text == "Æther Vial"


def test_survives_pickling():
    response = GathererResponse(302, {"Location": "/b"}, b"", "/a")

    restored = pickle.loads(pickle.dumps(response))

    assert restored == response
    assert restored.location == "/b"


def test_to_dict():
    data = GathererResponse(200, {"Server": "IIS"}, b"abc", "/x").to_dict()

    assert data == {
        "status_code": 200,
        "uri": "/x",
        "headers": {"Server": "IIS"},
        "size": 3,
    }
