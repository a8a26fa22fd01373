"""Rectangle arithmetic and client size constraints."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in screen coordinates."""

    x: int
    y: int
    w: int
    h: int

    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def bottom(self) -> int:
        return self.y + self.h


def _ratio(num: float, den: float) -> float:
    """Divide like floating point hardware does, without raising on zero."""
    if den:
        return num / den
    if num > 0:
        return math.inf
    if num < 0:
        return -math.inf
    return math.nan


def _cmod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    r = abs(a) % abs(b)
    return r if a >= 0 else -r


@dataclass(frozen=True)
class SizeHints:
    """A client's size constraints, as its normal hints describe them.

    Zero means "no constraint" for increments and maxima; aspect limits
    are only applied when both are positive.
    """

    base_w: int = 0
    base_h: int = 0
    inc_w: int = 0
    inc_h: int = 0
    max_w: int = 0
    max_h: int = 0
    min_w: int = 0
    min_h: int = 0
    min_aspect: float = 0.0
    max_aspect: float = 0.0

    @classmethod
    def from_wm_hints(
        cls,
        *,
        base: Tuple[int, int] | None = None,
        minimum: Tuple[int, int] | None = None,
        increment: Tuple[int, int] | None = None,
        maximum: Tuple[int, int] | None = None,
        aspect: Tuple[Tuple[int, int], Tuple[int, int]] | None = None,
    ) -> "SizeHints":
        """Build hints from the fields a window supplied.

        The base size falls back to the minimum size and the minimum size
        to the base size. ``aspect`` is ``((min_x, min_y), (max_x, max_y))``.
        """
        base_size = base if base is not None else minimum
        min_size = minimum if minimum is not None else base
        base_w, base_h = base_size if base_size is not None else (0, 0)
        min_w, min_h = min_size if min_size is not None else (0, 0)
        inc_w, inc_h = increment if increment is not None else (0, 0)
        max_w, max_h = maximum if maximum is not None else (0, 0)
        if aspect is not None:
            (min_x, min_y), (max_x, max_y) = aspect
            min_aspect = _ratio(min_y, min_x)
            max_aspect = _ratio(max_x, max_y)
        else:
            min_aspect = max_aspect = 0.0
        return cls(
            base_w, base_h, inc_w, inc_h, max_w, max_h, min_w, min_h,
            min_aspect, max_aspect,
        )

    @property
    def is_fixed(self) -> bool:
        """Whether the window allows exactly one size."""
        return bool(
            self.max_w
            and self.max_h
            and self.max_w == self.min_w
            and self.max_h == self.min_h
        )


def intersect(rect: Rect, area: Rect) -> int:
    """Return the area shared by ``rect`` and ``area``."""
    width = max(0, min(rect.right, area.right) - max(rect.x, area.x))
    height = max(0, min(rect.bottom, area.bottom) - max(rect.y, area.y))
    return width * height


def rect_to_monitor(rect: Rect, monitors: Sequence[Rect], default: int) -> int:
    """Index of the monitor area overlapping ``rect`` most, else ``default``.

    On equal overlap the earlier monitor wins.
    """
    best, best_area = default, 0
    for index, area in enumerate(monitors):
        shared = intersect(rect, area)
        if shared > best_area:
            best, best_area = index, shared
    return best


def apply_size_hints(
    rect: Rect,
    current: Rect,
    hints: SizeHints,
    area: Rect,
    screen: Tuple[int, int],
    bar_height: int,
    border: int,
    gap: int = 0,
    interact: bool = False,
    use_hints: bool = True,
) -> Tuple[Rect, bool]:
    """Constrain a proposed client geometry.

    ``current`` is the client's present geometry, ``area`` the window area
    of its monitor and ``screen`` the ``(width, height)`` of the display.
    Interactive moves are kept on the screen, others on the monitor.
    Returns the adjusted geometry and whether it differs from ``current``.
    """
    x, y, w, h = rect.x, rect.y, max(1, rect.w), max(1, rect.h)
    outer_w = current.w + 2 * border + gap
    outer_h = current.h + 2 * border + gap
    screen_w, screen_h = screen
    if interact:
        if x > screen_w:
            x = screen_w - outer_w
        if y > screen_h:
            y = screen_h - outer_h
        if x + w + 2 * border < 0:
            x = 0
        if y + h + 2 * border < 0:
            y = 0
    else:
        if x >= area.right:
            x = area.right - outer_w
        if y >= area.bottom:
            y = area.bottom - outer_h
        if x + w + 2 * border <= area.x:
            x = area.x
        if y + h + 2 * border <= area.y:
            y = area.y
    h = max(h, bar_height)
    w = max(w, bar_height)
    if use_hints:
        base_is_min = hints.base_w == hints.min_w and hints.base_h == hints.min_h
        if not base_is_min:
            w -= hints.base_w
            h -= hints.base_h
        if hints.min_aspect > 0 and hints.max_aspect > 0:
            if hints.max_aspect < _ratio(w, h):
                w = int(h * hints.max_aspect + 0.5)
            elif hints.min_aspect < _ratio(h, w):
                h = int(w * hints.min_aspect + 0.5)
        if base_is_min:
            w -= hints.base_w
            h -= hints.base_h
        if hints.inc_w:
            w -= _cmod(w, hints.inc_w)
        if hints.inc_h:
            h -= _cmod(h, hints.inc_h)
        w = max(w + hints.base_w, hints.min_w)
        h = max(h + hints.base_h, hints.min_h)
        if hints.max_w:
            w = min(w, hints.max_w)
        if hints.max_h:
            h = min(h, hints.max_h)
    result = Rect(x, y, w, h)
    return result, result != current


def client_geometry(
    rect: Rect,
    border: int,
    gap: int,
    borderpx: int,
    floating: bool,
    monocle: bool,
    tiled_count: int,
) -> Tuple[Rect, int]:
    """Final window geometry and border width for a client being resized.

    ``floating`` covers both floating clients and layouts that do not
    arrange. A lone tiled client or the monocle layout loses its border
    and gaps; other tiled clients are inset by ``gap``.
    """
    if floating:
        offset = shrink = 0
        width = border
    elif monocle or tiled_count == 1:
        offset = 0
        shrink = -2 * borderpx
        width = 0
    else:
        offset = gap
        shrink = 2 * gap
        width = border
    placed = Rect(rect.x + offset, rect.y + offset, rect.w - shrink, rect.h - shrink)
    return placed, width