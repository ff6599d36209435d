from __future__ import annotations

import math
from typing import Any, Mapping

ValuesMap = Mapping[str, Mapping[Any, Any]]


def stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)


def map_value(key_name: str | None, raw: Any, values_map: ValuesMap | None) -> Any:
    """Return ``values_map[key_name][raw]`` or *raw* when there is no override.

    Only the top-level key name selects the sub-map; ``auth.type`` and
    ``type`` share nothing, but ``authType.x`` uses the ``authType`` table.
    Booleans only match their ``"true"``/``"false"`` keys, never ``1``/``0``.
    """
    if not values_map or key_name is None:
        return raw
    table = values_map.get(key_name)
    if not isinstance(table, Mapping):
        return raw

    if not isinstance(raw, bool):
        try:
            if raw in table:
                return table[raw]
        except TypeError:
            return raw

    text = stringify(raw)
    if text in table:
        return table[text]
    return raw
