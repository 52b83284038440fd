# wikiextract/response.py
from __future__ import annotations
import json
import logging
from typing import Any, Union

import requests

from wikiextract.datatypes import ExtractPage
from wikiextract.errors import LanguageNotFound, NotFound

logger = logging.getLogger(__name__)

# Body text, or whatever went wrong while fetching it
RawBody = Union[str, requests.RequestException, UnicodeDecodeError]


def interpret(raw_body: RawBody) -> str:
    """
    Turn a fetched body into the page extract.

    1. transport failure      -> LanguageNotFound
    2. not JSON / bad shape   -> NotFound
    3. no page entries        -> NotFound
    Otherwise the first page's `extract` is returned untouched.
    """
    if isinstance(raw_body, (requests.RequestException, UnicodeDecodeError)):
        logger.debug("Transport failure: %r", raw_body)
        raise LanguageNotFound(str(raw_body)) from raw_body

    try:
        payload = json.loads(raw_body)
    except (ValueError, RecursionError) as exc:
        logger.debug("Body is not JSON: %s", exc)
        raise NotFound(f"invalid JSON: {exc}") from exc

    return select_page(payload).extract


def select_page(payload: Any) -> ExtractPage:
    """
    Validate the decoded payload against {"query": {"pages": {id: {"extract": str}}}}
    and return the first page entry. Unknown fields are ignored.
    """
    pages = _pages_of(payload)

    entries: list[ExtractPage] = []
    for page_id, page in pages.items():
        # every entry must carry an extract, e.g. missing pages don't
        if not isinstance(page, dict) or not isinstance(page.get("extract"), str):
            logger.debug("Page %s has no extract: %r", page_id, page)
            raise NotFound(f"page {page_id} has no extract")
        try:
            page["extract"].encode("utf-8")
        except UnicodeEncodeError as exc:
            # lone surrogate escapes such as "\ud800"
            raise NotFound(f"page {page_id} extract is not valid text") from exc
        title = page.get("title")
        entries.append(
            ExtractPage(
                page_id=str(page_id),
                extract=page["extract"],
                title=title if isinstance(title, str) else None,
            )
        )

    if not entries:
        raise NotFound("no pages in response")

    chosen = entries[0]
    if len(entries) > 1:
        logger.debug("%d pages returned, using %s", len(entries), chosen.page_id)
    return chosen


def _pages_of(payload: Any) -> dict[str, Any]:
    if not isinstance(payload, dict):
        raise NotFound("response is not an object")
    query = payload.get("query")
    if not isinstance(query, dict):
        raise NotFound("response has no 'query' object")
    pages = query.get("pages")
    if not isinstance(pages, dict):
        raise NotFound("response has no 'query.pages' mapping")
    return pages
