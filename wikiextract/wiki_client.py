# wikiextract/wiki_client.py
from __future__ import annotations
import logging
from typing import Optional

import requests

from wikiextract.query import build_request
from wikiextract.response import RawBody, interpret

logger = logging.getLogger(__name__)


class ExtractClient:
    """
    Thin wrapper around a requests.Session for the extracts query.
    One blocking request per lookup; no retries, transport default timeout.
    """

    def __init__(self, session: Optional[requests.Session] = None) -> None:
        self._session = session or requests.Session()

    def __enter__(self) -> "ExtractClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._session.close()

    def fetch(self, request: requests.PreparedRequest) -> RawBody:
        """
        Send the prepared request and return the body text.
        Transport errors are returned rather than raised so that
        `interpret` decides how they surface.
        """
        try:
            resp = self._session.send(request)
        except requests.RequestException as exc:
            return exc

        logger.debug("HTTP %s from %s", resp.status_code, resp.url)
        # status codes are not transport failures; error bodies fail parsing
        try:
            return resp.content.decode(resp.encoding or "utf-8")
        except UnicodeDecodeError as exc:
            return exc
        except LookupError as exc:
            # unknown charset in Content-Type
            return requests.exceptions.ContentDecodingError(str(exc))

    def lookup(self, language_code: str, phrase: str) -> str:
        """
        Build -> send -> interpret. Returns the intro extract for `phrase`.
        Raises InvalidEndpoint, LanguageNotFound or NotFound.
        """
        request = build_request(language_code, phrase)
        return interpret(self.fetch(request))
