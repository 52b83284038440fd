# wikiextract/query.py
from __future__ import annotations
import logging
from urllib.parse import urlsplit

import requests

from wikiextract import config
from wikiextract.datatypes import QueryParams
from wikiextract.errors import InvalidEndpoint

logger = logging.getLogger(__name__)

# code points a URL host may not contain (percent-encoding included)
_FORBIDDEN_HOST_CHARS = frozenset("\x00\t\n\r #%/:<>?@[\\]^|\x7f")


def api_endpoint(language_code: str) -> str:
    """
    Build the action API endpoint hosted on the target language edition.
    Sample: https://en.wikipedia.org/w/api.php
    """
    return config.API_URL_TEMPLATE.format(lang=language_code)


def build_request(language_code: str, phrase: str) -> requests.PreparedRequest:
    """
    Prepare (but do not send) the GET for the intro extract of `phrase`.

    - Query string: format=json, action=query, prop=extracts, exintro,
      explaintext, redirects=1, titles=<phrase>.
    - Raises InvalidEndpoint when the language code cannot form a valid URL.
      Codes that parse but name no real host (e.g. "C.") are left to fail
      at request time.
    """
    url = api_endpoint(language_code)
    headers = {
        "User-Agent": config.DEFAULT_UA,
        "Accept": "application/json",
    }
    params = QueryParams(titles=phrase).to_query()

    try:
        prepared = requests.Request(
            "GET", url, headers=headers, params=params
        ).prepare()
        parts = urlsplit(prepared.url)
        parts.port  # raises ValueError on a non-numeric port
        host = parts.hostname or ""
    except (requests.exceptions.RequestException, ValueError) as exc:
        raise InvalidEndpoint(language_code, str(exc)) from exc

    bad_chars = any(ch in _FORBIDDEN_HOST_CHARS or ch < " " for ch in host)
    if not host or host.startswith(".") or bad_chars:
        raise InvalidEndpoint(language_code, f"invalid host: {host!r}")

    logger.debug("Prepared request: %s", prepared.url)
    return prepared
