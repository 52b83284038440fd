# wikiextract/language.py
from __future__ import annotations
from typing import Optional

from wikiextract import config


def resolve_language(flag: Optional[str], env_lang: Optional[str]) -> str:
    """
    Pick the language code: explicit flag, else the first two characters
    of the locale variable (e.g. "fr_FR.UTF-8" -> "fr"), else the default.
    Nothing is validated here; a bad code only fails once the request does.
    """
    if flag:
        return flag
    if env_lang:
        return env_lang[:2]
    return config.DEFAULT_LANGUAGE
