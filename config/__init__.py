from .errors import FormatUrlTemplateError, OptionsError, UrlParseError
from .options import DEFAULT_OPTIONS, PluginOptions, deep_merge, merge_options, normalize_keys
from .parser import load_json_or_jsonc, loads_json_or_jsonc

__all__ = [
    "FormatUrlTemplateError",
    "OptionsError",
    "UrlParseError",
    "DEFAULT_OPTIONS",
    "PluginOptions",
    "deep_merge",
    "merge_options",
    "normalize_keys",
    "load_json_or_jsonc",
    "loads_json_or_jsonc",
]
