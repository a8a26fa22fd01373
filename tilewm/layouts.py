"""Tiling layouts: where each tiled client of a monitor is placed.

Every layout takes the monitor's window area and the border widths of the
tiled clients in list order. It returns the geometry requested for each
client, before gaps and size hints are applied, assuming each request is
honoured when the following clients are placed.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from tilewm.geometry import Rect, client_geometry

_SYMBOL_SIZE = 16


def _outer_height(requested: int, border: int, gap: int, count: int) -> int:
    """Height a client takes up once placed, border and gap included."""
    placed, _ = client_geometry(
        Rect(0, 0, 0, requested), border, gap, border, False, False, count
    )
    return placed.h + 2 * border + gap


def tile(
    area: Rect, borders: Sequence[int], nmaster: int, mfact: float, gap: int = 0
) -> List[Rect]:
    """Masters stacked on the left, the other clients stacked on the right."""
    count = len(borders)
    if count == 0:
        return []
    if count > nmaster:
        master_w = int(area.w * mfact) if nmaster else 0
    else:
        master_w = area.w
    master_y = stack_y = 0
    result: List[Rect] = []
    for index, border in enumerate(borders):
        if index < nmaster:
            h = (area.h - master_y) // (min(count, nmaster) - index)
            rect = Rect(
                area.x,
                area.y + master_y,
                master_w - 2 * border + (gap if count > 1 else 0),
                h - 2 * border,
            )
            outer = _outer_height(rect.h, border, gap, count)
            if master_y + outer < area.h:
                master_y += outer
        else:
            h = (area.h - stack_y) // (count - index)
            rect = Rect(
                area.x + master_w,
                area.y + stack_y,
                area.w - master_w - 2 * border,
                h - 2 * border,
            )
            outer = _outer_height(rect.h, border, gap, count)
            if stack_y + outer < area.h:
                stack_y += outer
        result.append(rect)
    return result


def grid(area: Rect, borders: Sequence[int], gap: int = 0) -> List[Rect]:
    """Clients in a grid filled column by column; the last row and column
    take up the remainder of the area."""
    count = len(borders)
    rows = 0
    while rows <= count // 2 and rows * rows < count:
        rows += 1
    cols = rows - 1 if rows and (rows - 1) * rows >= count else rows
    cell_h = area.h // (rows or 1)
    cell_w = area.w // (cols or 1)
    result: List[Rect] = []
    for index, border in enumerate(borders):
        x = area.x + (index // rows) * cell_w
        y = area.y + (index % rows) * cell_h
        extra_h = area.h - cell_h * rows if (index + 1) % rows == 0 else gap
        extra_w = area.w - cell_w * cols if index >= rows * (cols - 1) else gap
        result.append(
            Rect(x, y, cell_w - 2 * border + extra_w, cell_h - 2 * border + extra_h)
        )
    return result


def centered_master(
    area: Rect, borders: Sequence[int], nmaster: int, mfact: float, gap: int = 0
) -> List[Rect]:
    """Masters in the middle column, the others alternating right and left."""
    count = len(borders)
    if count == 0:
        return []
    master_w = area.w
    master_x = 0
    stack_w = master_w
    if count > nmaster:
        master_w = int(area.w * mfact) if nmaster else 0
        stack_w = area.w - master_w
        if count - nmaster > 1:
            master_x = (area.w - master_w) // 2
            stack_w = (area.w - master_w) // 2
    master_y = right_y = left_y = 0
    result: List[Rect] = []
    for index, border in enumerate(borders):
        if index < nmaster:
            h = (area.h - master_y) // (min(count, nmaster) - index)
            rect = Rect(
                area.x + master_x,
                area.y + master_y,
                master_w - 2 * border + (gap if count > 1 else 0),
                h - 2 * border,
            )
            master_y += _outer_height(rect.h, border, gap, count)
        elif (index - nmaster) % 2:
            h = (area.h - left_y) // ((1 + count - index) // 2)
            rect = Rect(
                area.x,
                area.y + left_y,
                stack_w - 2 * border + (gap if count > 1 else 0),
                h - 2 * border,
            )
            left_y += _outer_height(rect.h, border, gap, count)
        else:
            h = (area.h - right_y) // ((1 + count - index) // 2)
            rect = Rect(
                area.x + master_x + master_w,
                area.y + right_y,
                stack_w - 2 * border,
                h - 2 * border,
            )
            right_y += _outer_height(rect.h, border, gap, count)
        result.append(rect)
    return result


def monocle(area: Rect, borders: Sequence[int]) -> List[Optional[Rect]]:
    """The first client (top of the focus stack) fills the area; the rest
    are hidden, shown as ``None``."""
    result: List[Optional[Rect]] = [None] * len(borders)
    if borders:
        border = borders[0]
        result[0] = Rect(area.x, area.y, area.w - 2 * border, area.h - 2 * border)
    return result


def monocle_symbol(count: int) -> Optional[str]:
    """Layout symbol showing the number of visible clients, or None for none."""
    if count <= 0:
        return None
    return f"[{count}]"[: _SYMBOL_SIZE - 1]