from __future__ import annotations

from typing import Any, Mapping

from config.options import PluginOptions, deep_merge, merge_options, normalize_keys
from formatters import FieldFormatter, FormatContext, format_query, format_url

PLUGIN_NAME = "format-url-template"
OPTIONS_KEY = "formatUrlTemplate"

FIELD_FORMATTERS: tuple[tuple[str, FieldFormatter], ...] = (
    ("uri", format_url),
    ("qs", format_query),
)


def per_call_options(request_options: Mapping[str, Any]) -> Mapping[str, Any] | None:
    plugins = request_options.get("plugins")
    if not isinstance(plugins, Mapping):
        return None
    return plugins.get(OPTIONS_KEY)


class FormatUrlTemplatePlugin:
    """Replace ``{ key }`` templates in ``uri`` and ``qs`` with values taken
    from other fields of the same request options.

    Factory-level *params* are merged over the defaults once; per-call
    overrides under ``plugins.formatUrlTemplate`` are merged on top for
    every request.
    """

    name = PLUGIN_NAME

    def __init__(self, params: Mapping[str, Any] | None = None) -> None:
        self.params: dict[str, Any] = deep_merge({}, normalize_keys(params))
        self.default_options = merge_options(self.params)

    def options_for(self, request_options: Mapping[str, Any]) -> PluginOptions:
        overrides = per_call_options(request_options)
        if overrides is None:
            return self.default_options
        return merge_options(self.params, overrides)

    def load(self, req: Any, request_options: Mapping[str, Any]) -> dict[str, Any]:
        """Return a copy of *request_options* with ``uri`` and ``qs`` formatted.

        *req* is the host's request object; it is accepted for interface
        compatibility and not inspected.
        """
        ctx = FormatContext(request_options=request_options, options=self.options_for(request_options))
        result = dict(request_options)
        for field, formatter in FIELD_FORMATTERS:
            result[field] = formatter(ctx, request_options.get(field))
        return result


def plugin_factory(params: Mapping[str, Any] | None = None) -> FormatUrlTemplatePlugin:
    return FormatUrlTemplatePlugin(params)
