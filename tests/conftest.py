"""Shared test helpers for wikiextract tests."""

from __future__ import annotations

import json
from typing import Any, Optional

import requests


class StubSession(requests.Session):
    """A requests.Session that answers from memory and records what was sent."""

    def __init__(
        self,
        body: Optional[bytes] = None,
        *,
        error: Optional[requests.RequestException] = None,
        status_code: int = 200,
        encoding: Optional[str] = "utf-8",
    ) -> None:
        super().__init__()
        self.body = body
        self.error = error
        self.status_code = status_code
        self.encoding = encoding
        self.sent: list[requests.PreparedRequest] = []
        self.closed = False

    def send(self, request, **kwargs):  # type: ignore[override]
        self.sent.append(request)
        if self.error is not None:
            raise self.error
        resp = requests.Response()
        resp.status_code = self.status_code
        resp._content = self.body if self.body is not None else b""
        resp.encoding = self.encoding
        resp.url = request.url
        resp.request = request
        return resp

    def close(self) -> None:
        self.closed = True
        super().close()


def api_body(pages: dict[str, Any]) -> bytes:
    """Encode an action API response with the given `query.pages` mapping."""
    return json.dumps({"batchcomplete": "", "query": {"pages": pages}}).encode("utf-8")

