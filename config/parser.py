from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .errors import OptionsError


def _string_end(text: str, start: int) -> int:
    """Index just past the string literal opening at *start*."""
    quote = text[start]
    i = start + 1
    while i < len(text):
        if text[i] == "\\":
            i += 2
            continue
        if text[i] == quote:
            return i + 1
        i += 1
    return len(text)


def _strip_comments(text: str) -> str:
    out: list[str] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch in ('"', "'"):
            end = _string_end(text, i)
            out.append(text[i:end])
            i = end
        elif text.startswith("//", i):
            end = text.find("\n", i)
            i = len(text) if end < 0 else end
        elif text.startswith("/*", i):
            end = text.find("*/", i + 2)
            i = len(text) if end < 0 else end + 2
        else:
            out.append(ch)
            i += 1
    return "".join(out)


def _strip_trailing_commas(text: str) -> str:
    out: list[str] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch in ('"', "'"):
            end = _string_end(text, i)
            out.append(text[i:end])
            i = end
            continue
        if ch == ",":
            rest = text[i + 1 :].lstrip(" \t\r\n")
            if rest[:1] in ("]", "}"):
                i += 1
                continue
        out.append(ch)
        i += 1
    return "".join(out)


def loads_json_or_jsonc(raw: str, *, source: str = "<string>") -> dict[str, Any]:
    cleaned = _strip_trailing_commas(_strip_comments(raw))
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise OptionsError(f"{source}: invalid JSON ({exc})") from exc
    if not isinstance(data, dict):
        raise OptionsError(f"{source}: top-level value must be an object")
    return data


def load_json_or_jsonc(path: Path) -> dict[str, Any]:
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise OptionsError(f"{path}: cannot read file ({exc})") from exc
    return loads_json_or_jsonc(raw, source=str(path))
