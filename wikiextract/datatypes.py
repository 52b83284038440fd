# wikiextract/datatypes.py
from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class QueryParams:
    """
    Query-string fields for an `action=query&prop=extracts` call.
    Only the phrase and the two booleans vary; the rest is fixed by the API.
    """

    titles: str
    exintro: bool = True
    explaintext: bool = True
    format: str = "json"
    action: str = "query"
    prop: str = "extracts"
    redirects: str = "1"  # the API wants a string flag here

    def to_query(self) -> dict[str, str]:
        """
        Wire form of the record. Booleans go out as "true"/"false".
        """
        return {
            "format": self.format,
            "action": self.action,
            "prop": self.prop,
            "exintro": _bool_text(self.exintro),
            "explaintext": _bool_text(self.explaintext),
            "redirects": self.redirects,
            "titles": self.titles,
        }


@dataclass(frozen=True, slots=True)
class ExtractPage:
    """
    A single page entry selected from `query.pages`.
    """

    page_id: str
    extract: str
    title: str | None = None


def _bool_text(value: bool) -> str:
    return "true" if value else "false"
