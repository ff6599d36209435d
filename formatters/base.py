from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Protocol

from config.options import PluginOptions
from templating import render_template


@dataclass(slots=True, frozen=True)
class ParsedUrl:
    href: str
    scheme: str
    netloc: str
    hostname: str | None
    port: int | None
    path: str
    query: str
    fragment: str

    def __str__(self) -> str:
        return self.href


@dataclass(slots=True)
class FormatContext:
    request_options: Mapping[str, Any]
    options: PluginOptions

    def render(self, template: str) -> str:
        return render_template(template, self.request_options, self.options.values_map)


class FieldFormatter(Protocol):
    def __call__(self, ctx: FormatContext, value: Any) -> Any: ...
