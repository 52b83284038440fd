# wikiextract/__main__.py
from __future__ import annotations

from wikiextract.cli import app

app(prog_name="wikiextract")
