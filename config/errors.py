from __future__ import annotations


class FormatUrlTemplateError(Exception):
    """Base class for errors surfaced to the calling pipeline."""


class OptionsError(FormatUrlTemplateError, ValueError):
    """Plugin options or an options file have the wrong shape."""


class UrlParseError(FormatUrlTemplateError, ValueError):
    """The rendered, encoded URL cannot be split into components."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"cannot parse rendered url {url!r}: {reason}")
        self.url = url
        self.reason = reason
