from __future__ import annotations

import logging
import re
from typing import Any
from urllib.parse import SplitResult, ParseResult, quote, urlsplit

from config.errors import UrlParseError
from .base import FormatContext, ParsedUrl

logger = logging.getLogger("urltemplate")

# unreserved and reserved URI characters, plus brackets for IPv6 hosts
_URI_SAFE = "-_.!~*'();/?:@&=+$,#[]"
_ESCAPED = re.compile(r"%[0-9A-Fa-f]{2}")


def encode_uri(text: str) -> str:
    """Percent-encode *text* as UTF-8, keeping existing ``%XX`` escapes."""
    out: list[str] = []
    pos = 0
    try:
        for match in _ESCAPED.finditer(text):
            out.append(quote(text[pos : match.start()], safe=_URI_SAFE))
            out.append(match.group(0))
            pos = match.end()
        out.append(quote(text[pos:], safe=_URI_SAFE))
    except UnicodeEncodeError as exc:
        raise UrlParseError(text, f"not encodable as UTF-8 ({exc.reason})") from exc
    return "".join(out)


def parse_url(text: str) -> ParsedUrl:
    try:
        parts = urlsplit(text)
        port = parts.port
    except ValueError as exc:
        logger.warning("rendered url is not parseable: %s (%s)", text, exc)
        raise UrlParseError(text, str(exc)) from exc

    return ParsedUrl(
        href=text,
        scheme=parts.scheme,
        netloc=parts.netloc,
        hostname=parts.hostname,
        port=port,
        path=parts.path,
        query=parts.query,
        fragment=parts.fragment,
    )


def url_to_string(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (SplitResult, ParseResult)):
        return value.geturl()
    href = getattr(value, "href", None)
    if isinstance(href, str):
        return href
    return str(value)


def format_url(ctx: FormatContext, uri: Any) -> Any:
    if not ctx.options.apply_to_url or not uri:
        logger.debug("uri formatter skipped (enabled=%s)", ctx.options.apply_to_url)
        return uri

    rendered = ctx.render(url_to_string(uri))
    parsed = parse_url(encode_uri(rendered))
    logger.debug("uri formatted -> %s", parsed.href)
    return parsed
