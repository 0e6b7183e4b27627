"""Response value returned by the Gatherer client.

Plain data so it can be stored by any cache store, including diskcache
which pickles its values.
"""

from dataclasses import dataclass, field
from typing import Mapping

import requests
from requests.structures import CaseInsensitiveDict


@dataclass
class GathererResponse:
    """Status, headers and body of one Gatherer GET."""

    status_code: int
    headers: CaseInsensitiveDict = field(default_factory=CaseInsensitiveDict)
    content: bytes = b""
    uri: str = ""
    encoding: str = "utf-8"

    def __post_init__(self):
        if not isinstance(self.headers, CaseInsensitiveDict):
            self.headers = CaseInsensitiveDict(self.headers or {})

    @classmethod
    def from_requests(cls, response: requests.Response, uri: str) -> "GathererResponse":
        return cls(
            status_code=response.status_code,
            headers=CaseInsensitiveDict(response.headers),
            content=response.content,
            uri=uri,
            encoding=response.encoding or "utf-8",
        )

    @property
    def location(self):
        return self.headers.get("Location")

    @property
    def is_redirect(self) -> bool:
        """True for a 3xx response that says where to go next."""
        return 300 <= self.status_code < 400 and bool(self.location)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        return self.content.decode(self.encoding, errors="replace")

    def to_dict(self) -> Mapping:
        return {
            "status_code": self.status_code,
            "uri": self.uri,
            "headers": dict(self.headers),
            "size": len(self.content),
        }
