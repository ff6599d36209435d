from .paths import NOT_FOUND, Lookup, resolve_path, split_path, top_level_key
from .placeholders import Literal, Placeholder, iter_segments
from .renderer import render_template
from .values import map_value, stringify

__all__ = [
    "NOT_FOUND",
    "Lookup",
    "resolve_path",
    "split_path",
    "top_level_key",
    "Literal",
    "Placeholder",
    "iter_segments",
    "render_template",
    "map_value",
    "stringify",
]
