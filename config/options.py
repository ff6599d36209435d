from __future__ import annotations

import copy
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from .errors import OptionsError

_ALIASES = {
    "apply_to_url": "applyToUrl",
    "apply_to_query_string": "applyToQueryString",
    "values_map": "valuesMap",
}


def _copy(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _copy(v) for k, v in value.items()}
    return copy.deepcopy(value)


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    return value


def deep_merge(base: Any, override: Any) -> Any:
    """Merge *override* into a copy of *base*; nested mappings merge key by key.

    Neither argument is modified. Non-mapping values in *override* replace
    whatever *base* holds at that key.
    """
    if isinstance(base, Mapping) and isinstance(override, Mapping):
        merged = _copy(base)
        for key, value in override.items():
            if key in merged:
                merged[key] = deep_merge(merged[key], value)
            else:
                merged[key] = _copy(value)
        return merged
    return _copy(override)


DEFAULT_OPTIONS: Mapping[str, Any] = _freeze(
    {
        "applyToUrl": True,
        "applyToQueryString": False,
        "valuesMap": {
            "authType": {
                "oauth": "oauth",
                "basic": "basic",
                "saml": "form",
                "cookie": "form",
            },
        },
    }
)


def normalize_keys(params: Mapping[str, Any] | None) -> dict[str, Any]:
    if params is None:
        return {}
    if not isinstance(params, Mapping):
        raise OptionsError(f"plugin options must be an object, got {type(params).__name__}")
    return {_ALIASES.get(k, k): v for k, v in params.items()}


def _flag(data: Mapping[str, Any], key: str, default: bool) -> bool:
    value = data.get(key, default)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise OptionsError(f"{key} must be a boolean, got {value!r}")
    return value


@dataclass(slots=True, frozen=True)
class PluginOptions:
    apply_to_url: bool = True
    apply_to_query_string: bool = False
    values_map: Mapping[str, Mapping[Any, Any]] = field(default_factory=lambda: DEFAULT_OPTIONS["valuesMap"])

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "PluginOptions":
        values_map = data.get("valuesMap")
        if values_map is None:
            values_map = {}
        if not isinstance(values_map, Mapping):
            raise OptionsError("valuesMap must be an object")
        for name, table in values_map.items():
            if not isinstance(table, Mapping):
                raise OptionsError(f"valuesMap.{name} must be an object")
        return cls(
            apply_to_url=_flag(data, "applyToUrl", True),
            apply_to_query_string=_flag(data, "applyToQueryString", False),
            values_map=_freeze(values_map),
        )


def merge_options(*layers: Mapping[str, Any] | None) -> PluginOptions:
    """Deep-merge option layers over the defaults, later layers winning."""
    merged: Any = DEFAULT_OPTIONS
    for layer in layers:
        merged = deep_merge(merged, normalize_keys(layer))
    return PluginOptions.from_mapping(merged)
