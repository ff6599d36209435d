from __future__ import annotations

import logging
from typing import Any

from .paths import resolve_path, top_level_key
from .placeholders import Literal, iter_segments
from .values import ValuesMap, map_value, stringify

logger = logging.getLogger("urltemplate")


def render_template(template: str, context: Any, values_map: ValuesMap | None = None) -> str:
    """Substitute every ``{ key.path }`` in *template* from *context*.

    Unresolvable placeholders are kept verbatim. The output is never
    rendered a second time.
    """
    out: list[str] = []
    for segment in iter_segments(template):
        if isinstance(segment, Literal):
            out.append(segment.text)
            continue

        lookup = resolve_path(context, segment.key)
        if not lookup.found:
            logger.debug("placeholder %s left unresolved", segment.token)
            out.append(segment.token)
            continue

        value = map_value(top_level_key(segment.key), lookup.value, values_map)
        out.append(stringify(value))
    return "".join(out)
