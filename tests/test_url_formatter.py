from urllib.parse import unquote, urlsplit

import pytest

from config.errors import UrlParseError
from config.options import PluginOptions, merge_options
from formatters.base import FormatContext, ParsedUrl
from formatters.url import encode_uri, format_url, parse_url, url_to_string


def _ctx(request_options, **overrides):
    return FormatContext(request_options=request_options, options=merge_options(overrides))


def test_encode_uri_keeps_reserved_characters():
    url = "https://user@example.com:8080/a/b;c?x=1&y=$,+#frag"
    assert encode_uri(url) == url


def test_encode_uri_handles_non_ascii():
    encoded = encode_uri("/users/Müller")
    assert encoded == "/users/M%C3%BCller"
    assert unquote(encoded) == "/users/Müller"


def test_encode_uri_is_idempotent_on_escapes():
    assert encode_uri("/a%20b c") == "/a%20b%20c"
    once = encode_uri("/ö é/ü")
    assert encode_uri(once) == once


def test_encode_uri_escapes_lone_percent_and_braces():
    assert encode_uri("/100%") == "/100%25"
    assert encode_uri("/{ x }") == "/%7B%20x%20%7D"


def test_encode_uri_rejects_lone_surrogates():
    with pytest.raises(UrlParseError):
        encode_uri("/\ud800")


def test_parse_url_components():
    parsed = parse_url("https://example.com:8443/api/v1?x=1#top")
    assert parsed == ParsedUrl(
        href="https://example.com:8443/api/v1?x=1#top",
        scheme="https",
        netloc="example.com:8443",
        hostname="example.com",
        port=8443,
        path="/api/v1",
        query="x=1",
        fragment="top",
    )
    assert str(parsed) == parsed.href


def test_parse_relative_url():
    parsed = parse_url("/api/foo/oauth/bar")
    assert parsed.path == "/api/foo/oauth/bar"
    assert parsed.hostname is None
    assert parsed.scheme == ""


@pytest.mark.parametrize("url", ["http://[::1/path", "http://example.com:notaport/"])
def test_parse_url_failures_raise(url):
    with pytest.raises(UrlParseError) as info:
        parse_url(url)
    assert info.value.url == url


def test_url_to_string_accepts_common_shapes():
    assert url_to_string("/a") == "/a"
    assert url_to_string(urlsplit("http://h/a?b=1")) == "http://h/a?b=1"
    assert url_to_string(parse_url("http://h/x")) == "http://h/x"


def test_format_url_renders_and_parses():
    request_options = {"uri": "https://example.com/users/{ name }/{authType}", "name": "Müller", "authType": "saml"}
    parsed = format_url(_ctx(request_options), request_options["uri"])
    assert isinstance(parsed, ParsedUrl)
    assert parsed.path == "/users/M%C3%BCller/form"
    assert unquote(parsed.path) == "/users/Müller/form"


def test_format_url_accepts_parsed_url_input():
    request_options = {"uri": parse_url("/api/{authType}"), "authType": "cookie"}
    assert format_url(_ctx(request_options), request_options["uri"]).href == "/api/form"


def test_format_url_disabled_returns_same_object():
    uri = "/api/{ authType }"
    ctx = FormatContext(request_options={"uri": uri, "authType": "oauth"}, options=PluginOptions(apply_to_url=False))
    assert format_url(ctx, uri) is uri


def test_format_url_without_uri_returns_it():
    assert format_url(_ctx({}), None) is None
    assert format_url(_ctx({"uri": ""}), "") == ""


def test_format_url_propagates_parse_failure():
    request_options = {"uri": "http://[{host}/x", "host": "::1"}
    with pytest.raises(UrlParseError):
        format_url(_ctx(request_options), request_options["uri"])
