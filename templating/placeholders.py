from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

OPEN = "{"
CLOSE = "}"


@dataclass(slots=True, frozen=True)
class Literal:
    text: str


@dataclass(slots=True, frozen=True)
class Placeholder:
    key: str
    token: str


Segment = Union[Literal, Placeholder]


def iter_segments(text: str) -> Iterator[Segment]:
    """Split *text* into literal runs and ``{ key }`` placeholders.

    Empty keys and unterminated braces stay literal. A ``{`` met inside an
    open token restarts the token there, so braces never nest.
    """
    buf: list[str] = []
    i = 0
    n = len(text)
    while i < n:
        start = text.find(OPEN, i)
        if start < 0:
            buf.append(text[i:])
            break
        buf.append(text[i:start])

        j = start + 1
        while j < n and text[j] not in (OPEN, CLOSE):
            j += 1

        if j >= n:
            buf.append(text[start:])
            break
        if text[j] == OPEN:
            buf.append(text[start:j])
            i = j
            continue

        token = text[start : j + 1]
        key = text[start + 1 : j].strip()
        if not key:
            buf.append(token)
        else:
            literal = "".join(buf)
            buf = []
            if literal:
                yield Literal(literal)
            yield Placeholder(key=key, token=token)
        i = j + 1

    rest = "".join(buf)
    if rest:
        yield Literal(rest)
