# wikiextract/cli.py
from __future__ import annotations
import logging
import os
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from wikiextract import __version__, config
from wikiextract.errors import WikiExtractError
from wikiextract.language import resolve_language
from wikiextract.utils import setup_logging
from wikiextract.wiki_client import ExtractClient

app = typer.Typer(
    add_completion=False,
    help="Print the introduction of a Wikipedia article as plain text.",
)
err_console = Console(stderr=True, soft_wrap=True, emoji=False)

logger = logging.getLogger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"wikiextract {__version__}")
        raise typer.Exit()


@app.command()
def main(
    ctx: typer.Context,
    text: Optional[list[str]] = typer.Argument(
        None, help="Article title or search phrase", show_default=False
    ),
    lang: Optional[str] = typer.Option(
        None,
        "--lang",
        "-l",
        help="Language designation, e.g., en, ko, es (default: from $LANG, else en)",
        show_default=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Look up TEXT on Wikipedia and print its plain-text intro extract.
    """
    setup_logging(verbose)

    # No phrase: show usage, never touch the network
    if not text:
        typer.echo(ctx.get_usage(), err=True)
        typer.echo(f"Try '{ctx.command_path} --help' for help.", err=True)
        raise typer.Exit(code=1)

    phrase = text[0]
    if len(text) > 1:
        logger.debug("Ignoring extra arguments: %s", text[1:])

    language = resolve_language(lang, os.environ.get(config.LANG_ENV_VAR))
    logger.debug("Looking up %r on %s.wikipedia.org", phrase, language)

    try:
        with ExtractClient() as client:
            extract = client.lookup(language, phrase)
    except WikiExtractError as exc:
        logger.debug("Lookup failed: %s", exc)
        err_console.print(f"[bold red]{escape(exc.message)}[/bold red]")
        raise typer.Exit(code=1)

    typer.echo(extract, color=True)
