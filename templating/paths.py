from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

_SEGMENT = re.compile(
    r"""
    \[\s*(?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)'|(?P<idx>-?\d+))\s*\]   # [0] ["a"] ['a']
    | (?P<name>[^.\[\]]+)                                          # bare name
    | (?P<dot>\.)
    """,
    re.VERBOSE,
)

SCALARS = (str, int, float, bool)


@dataclass(slots=True, frozen=True)
class Lookup:
    found: bool
    value: Any = None


NOT_FOUND = Lookup(found=False)


def split_path(path: str) -> list[str | int]:
    """Split ``a.b[0]["c.d"]`` into ``["a", "b", 0, "c.d"]``.

    Returns an empty list when the path is syntactically invalid.
    """
    parts: list[str | int] = []
    pos = 0
    expect_name = True
    while pos < len(path):
        match = _SEGMENT.match(path, pos)
        if match is None:
            return []
        pos = match.end()
        if match.group("dot") is not None:
            if expect_name:
                return []
            expect_name = True
            continue
        if match.group("name") is not None:
            if not expect_name:
                return []
            parts.append(match.group("name").strip())
        elif match.group("idx") is not None:
            if not parts:
                return []
            parts.append(int(match.group("idx")))
        else:
            quoted = match.group("dq")
            parts.append(quoted if quoted is not None else match.group("sq"))
        expect_name = False
    if expect_name and parts:
        return []
    return parts


def top_level_key(path: str) -> str | None:
    parts = split_path(path)
    if not parts or not isinstance(parts[0], str):
        return None
    return parts[0]


def _step(current: Any, part: str | int) -> Lookup:
    if current is None or isinstance(current, (str, bytes)):
        return NOT_FOUND
    if isinstance(current, Mapping):
        if part in current:
            return Lookup(True, current[part])
        if isinstance(part, int) and str(part) in current:
            return Lookup(True, current[str(part)])
        return NOT_FOUND
    if isinstance(current, Sequence):
        index = part if isinstance(part, int) else _as_index(part)
        if index is None or index < 0 or index >= len(current):
            return NOT_FOUND
        return Lookup(True, current[index])
    return NOT_FOUND


def _as_index(part: str) -> int | None:
    return int(part) if part.isdigit() else None


def resolve_path(context: Any, path: str) -> Lookup:
    """Resolve *path* against *context*; only scalar leaves count as found."""
    parts = split_path(path)
    if not parts:
        return NOT_FOUND

    current = context
    for part in parts:
        result = _step(current, part)
        if not result.found:
            return NOT_FOUND
        current = result.value

    if isinstance(current, SCALARS):
        return Lookup(True, current)
    return NOT_FOUND
