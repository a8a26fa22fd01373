"""Process ancestry lookups used to pair terminals with their children."""

from __future__ import annotations

from pathlib import Path
from typing import Callable


def parent_pid(pid: int, proc_root: str | Path = "/proc") -> int:
    """Return the parent of ``pid`` from its stat file, or 0 if unknown."""
    try:
        data = (Path(proc_root) / str(pid) / "stat").read_text()
    except OSError:
        return 0
    _, sep, rest = data.rpartition(")")
    if not sep:
        return 0
    fields = rest.split()
    if len(fields) < 2:
        return 0
    try:
        return int(fields[1])
    except ValueError:
        return 0


def is_descendant(
    parent: int, child: int, parent_of: Callable[[int], int] = parent_pid
) -> bool:
    """Return whether ``child`` is ``parent`` or one of its descendants."""
    seen: set[int] = set()
    while child != parent and child != 0:
        if child in seen:
            return False
        seen.add(child)
        child = parent_of(child)
    return child != 0