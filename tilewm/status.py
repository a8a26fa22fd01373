"""Status text with inline drawing codes.

Codes sit between ``^`` characters: ``c#rrggbb`` and ``b#rrggbb`` set the
foreground and background colour, ``d`` restores the default colours,
``rX,Y,W,H`` fills a rectangle relative to the current position and
``fN`` moves the position by ``N`` pixels. One code block may hold several
commands.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Tuple, Union

_PADDING = 2
_LEADING_INT = re.compile(r"\s*([+-]?\d*)")


@dataclass(frozen=True)
class TextRun:
    """Text drawn at the current position, which then moves past it."""

    text: str


@dataclass(frozen=True)
class SetForeground:
    color: str


@dataclass(frozen=True)
class SetBackground:
    color: str


@dataclass(frozen=True)
class ResetColors:
    """Go back to the bar's normal colours."""


@dataclass(frozen=True)
class FillRect:
    """A filled rectangle; ``x`` counts from the current position."""

    x: int
    y: int
    w: int
    h: int


@dataclass(frozen=True)
class Advance:
    """Move the current position by ``dx`` pixels."""

    dx: int


Command = Union[TextRun, SetForeground, SetBackground, ResetColors, FillRect, Advance]


def _leading_int(text: str, pos: int) -> int:
    found = _LEADING_INT.match(text, pos)
    digits = found.group(1) if found else ""
    try:
        return int(digits)
    except ValueError:
        return 0


def _blocks(text: str) -> Iterator[Tuple[str, Optional[str]]]:
    """Yield each run of text with the code that follows it.

    The last run comes with ``None``; an unterminated code and whatever
    follows it are dropped.
    """
    pos = 0
    while True:
        start = text.find("^", pos)
        if start < 0:
            yield text[pos:], None
            return
        end = text.find("^", start + 1)
        if end < 0:
            yield text[pos:start], None
            return
        yield text[pos:start], text[start + 1:end]
        pos = end + 1


def _parse_rect(code: str, pos: int) -> Tuple[FillRect, int]:
    values = []
    for index in range(4):
        values.append(_leading_int(code, pos))
        if index < 3:
            comma = code.find(",", pos + 1)
            if comma < 0:
                raise ValueError(f"malformed rectangle in status code {code!r}")
            pos = comma + 1
    return FillRect(*values), pos + 1


def _parse_code(code: str) -> Iterator[Command]:
    pos = 0
    while pos < len(code):
        letter = code[pos]
        if letter == "c":
            yield SetForeground(code[pos + 1:pos + 8])
            pos += 8
        elif letter == "b":
            yield SetBackground(code[pos + 1:pos + 8])
            pos += 8
        elif letter == "d":
            yield ResetColors()
            pos += 1
        elif letter == "r":
            rect, pos = _parse_rect(code, pos + 1)
            yield rect
        elif letter == "f":
            yield Advance(_leading_int(code, pos + 1))
            pos += 2
        else:
            pos += 1


def parse_status(text: str) -> List[Command]:
    """Split status text into drawing commands, in drawing order.

    Raises ValueError on a rectangle code with fewer than four fields.
    """
    commands: List[Command] = []
    for run, code in _blocks(text):
        if run:
            commands.append(TextRun(run))
        if code is not None:
            commands.extend(_parse_code(code))
    return commands


def status_width(text: str, text_width: Callable[[str], int]) -> int:
    """Width the status takes on the bar, one pixel of padding on each side.

    Text runs count by ``text_width``; of the codes, only an ``f`` that
    opens a code block adds to the width.
    """
    width = 0
    for run, code in _blocks(text):
        width += text_width(run)
        if code is not None and code.startswith("f"):
            width += _leading_int(code, 1)
    return width + _PADDING