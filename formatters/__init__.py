from .base import FieldFormatter, FormatContext, ParsedUrl
from .query import format_query
from .url import encode_uri, format_url, parse_url

__all__ = ["FieldFormatter", "FormatContext", "ParsedUrl", "format_query", "encode_uri", "format_url", "parse_url"]
