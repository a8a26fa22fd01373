"""Monitor bookkeeping: bar placement, screen lists, tray and bar clicks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from tilewm.geometry import Rect


@dataclass(frozen=True)
class BarPosition:
    """Window area top and height of a monitor, and the bar's y position."""

    wy: int
    wh: int
    by: int


def bar_position(
    my: int, mh: int, bar_height: int, showbar: bool, topbar: bool
) -> BarPosition:
    """Place the bar on a monitor at ``my`` of height ``mh``.

    A hidden bar sits just above the top of the screen.
    """
    wy, wh = my, mh
    if not showbar:
        return BarPosition(wy, wh, -bar_height)
    wh -= bar_height
    if topbar:
        return BarPosition(wy + bar_height, wh, wy)
    return BarPosition(wy, wh, wy + wh)


def unique_geometries(screens: Iterable[Rect]) -> List[Rect]:
    """Drop screens whose geometry repeats an earlier one, keeping order."""
    unique: List[Rect] = []
    for screen in screens:
        if screen not in unique:
            unique.append(screen)
    return unique


def monitor_in_direction(monitors: Sequence, selected: int, direction: int) -> int:
    """Index of the monitor after (positive) or before ``selected``, wrapping."""
    if not monitors:
        raise ValueError("no monitors")
    count = len(monitors)
    if not 0 <= selected < count:
        raise IndexError(f"monitor {selected} out of range")
    if direction > 0:
        return (selected + 1) % count
    return (selected - 1) % count


def systray_width(icon_widths: Iterable[int], spacing: int) -> int:
    """Width of the system tray holding icons of the given widths.

    An empty tray is one pixel wide.
    """
    width = sum(w + spacing for w in icon_widths)
    return width + spacing if width else 1


def systray_monitor(
    count: int, selected: int, pinning: int, fail_first: bool
) -> int:
    """Index of the monitor that shows the system tray.

    Without pinning the tray follows the selected monitor; otherwise it
    stays on monitor ``pinning`` (counted from 1), or the last one if there
    are fewer, or the first one when ``fail_first`` is set.
    """
    if count < 1:
        raise ValueError("no monitors")
    if not pinning:
        return selected
    if fail_first and count < pinning:
        return 0
    return max(0, min(pinning - 1, count - 1))


def bar_click(
    x: int,
    tag_widths: Sequence[int],
    layout_width: int,
    status_width: int,
    bar_width: int,
    tray_width: int,
) -> Tuple[str, Optional[int]]:
    """Classify a click at ``x`` on the bar.

    Returns ``("tag", index)``, ``("layout", None)``, ``("status", None)``
    or ``("title", None)``.
    """
    edge = 0
    for index, width in enumerate(tag_widths):
        edge += width
        if x < edge:
            return "tag", index
    if x < edge + layout_width:
        return "layout", None
    if x > bar_width - status_width - tray_width:
        return "status", None
    return "title", None