from __future__ import annotations

import logging
from typing import Any, Mapping

from .base import FormatContext

logger = logging.getLogger("urltemplate")


def format_query(ctx: FormatContext, qs: Any) -> Any:
    if not ctx.options.apply_to_query_string or not qs:
        logger.debug("qs formatter skipped (enabled=%s)", ctx.options.apply_to_query_string)
        return qs
    if not isinstance(qs, Mapping):
        logger.debug("qs formatter skipped: %s is not a mapping", type(qs).__name__)
        return qs

    formatted = {key: ctx.render(value) if isinstance(value, str) else value for key, value in qs.items()}
    logger.debug("qs formatted %d entries", len(formatted))
    return formatted
