# wikiextract/config.py
from __future__ import annotations

from wikiextract import __version__

# MediaWiki action API, one host per language edition
API_URL_TEMPLATE = "https://{lang}.wikipedia.org/w/api.php"

# Language resolution
DEFAULT_LANGUAGE = "en"
LANG_ENV_VAR = "LANG"

# HTTP etiquette
DEFAULT_UA = f"wikiextract/{__version__} (command-line extract lookup)"
