# wikiextract/errors.py
from __future__ import annotations


class WikiExtractError(Exception):
    """
    Base error. `message` is what the CLI shows the user.
    """

    message = "Lookup failed."

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.message)
        self.detail = detail


class InvalidEndpoint(WikiExtractError):
    """
    The language code does not yield a well-formed API URL.
    Raised before any network activity.
    """

    def __init__(self, language_code: str, detail: str | None = None) -> None:
        self.language_code = language_code
        self.message = f"Invalid language code: {language_code!r}"
        super().__init__(detail or self.message)


class LanguageNotFound(WikiExtractError):
    """
    The request never produced a body.
    A non-existent language subdomain shows up as a DNS/connect failure,
    so every transport failure lands here.
    """

    message = "That language does not exist."


class NotFound(WikiExtractError):
    """
    The body did not match the expected schema, or held no pages.
    """

    message = "Not found..."
