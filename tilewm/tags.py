"""Tag views with per-tag layout, master and bar settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence

ALL_TAGS = 0xFFFFFFFF
"""A view mask that selects every tag."""
MAX_TAGS = 31
"""Most tags that fit the tag bit mask."""
_SYMBOL_SIZE = 16
_MFACT_MIN = 0.05
_MFACT_MAX = 0.95


@dataclass(frozen=True, eq=False)
class Layout:
    """A named arrangement; ``arrange`` is None for the floating layout.

    Layouts compare by identity.
    """

    symbol: str
    arrange: Optional[Callable[..., Any]] = None

    @property
    def floating(self) -> bool:
        """Whether this layout leaves clients where they are."""
        return self.arrange is None


def tag_mask(count: int) -> int:
    """Bit mask covering ``count`` tags."""
    if not 0 <= count <= MAX_TAGS:
        raise ValueError(f"tag count {count} outside 0..{MAX_TAGS}")
    return (1 << count) - 1


def _lowest_bit(mask: int) -> int:
    return (mask & -mask).bit_length() - 1


@dataclass
class _TagSettings:
    nmaster: int
    mfact: float
    sellt: int
    layouts: List[Layout]
    showbar: bool


class TagState:
    """The tags a monitor shows and the settings remembered for each tag.

    Tag ``curtag`` counts from 1; 0 stands for the view of all tags.
    """

    def __init__(
        self,
        ntags: int,
        mfact: float,
        nmaster: int,
        showbar: bool,
        layouts: Sequence[Layout],
    ) -> None:
        if not layouts:
            raise ValueError("at least one layout is needed")
        self.ntags = ntags
        self.mask = tag_mask(ntags)
        self.layouts = tuple(layouts)
        self.tagset = [1, 1]
        self.seltags = 0
        self.sellt = 0
        self.lt = [self.layouts[0], self.layouts[1 % len(self.layouts)]]
        self.mfact = mfact
        self.nmaster = nmaster
        self.showbar = showbar
        self.symbol = self._clip(self.layouts[0].symbol)
        self.curtag = self.prevtag = 1
        self._pertag = [
            _TagSettings(nmaster, mfact, self.sellt, list(self.lt), showbar)
            for _ in range(ntags + 1)
        ]

    @staticmethod
    def _clip(symbol: str) -> str:
        return symbol[: _SYMBOL_SIZE - 1]

    @property
    def tags(self) -> int:
        """The tags currently in view."""
        return self.tagset[self.seltags]

    @property
    def layout(self) -> Layout:
        """The selected layout."""
        return self.lt[self.sellt]

    @property
    def _current(self) -> _TagSettings:
        return self._pertag[self.curtag]

    def _apply_pertag(self) -> None:
        settings = self._current
        self.nmaster = settings.nmaster
        self.mfact = settings.mfact
        self.sellt = settings.sellt
        self.lt[self.sellt] = settings.layouts[self.sellt]
        self.lt[self.sellt ^ 1] = settings.layouts[self.sellt ^ 1]
        self.symbol = self._clip(self.layout.symbol)
        if self.showbar != settings.showbar:
            self.toggle_bar()

    def view(self, mask: int) -> bool:
        """Show the tags in ``mask``; an empty mask returns to the previous view.

        Returns False when the view is already showing exactly those tags.
        """
        mask &= ALL_TAGS
        if mask & self.mask == self.tags:
            return False
        self.seltags ^= 1
        if mask & self.mask:
            self.tagset[self.seltags] = mask & self.mask
            self.prevtag = self.curtag
            self.curtag = 0 if mask == ALL_TAGS else _lowest_bit(mask) + 1
        else:
            self.prevtag, self.curtag = self.curtag, self.prevtag
        self._apply_pertag()
        return True

    def toggle_view(self, mask: int) -> bool:
        """Add or remove the tags in ``mask`` from the view.

        A change that would leave no tag in view is refused (returns False).
        """
        newtagset = self.tags ^ (mask & self.mask)
        if not newtagset:
            return False
        self.tagset[self.seltags] = newtagset
        in_view = self.curtag > 0 and newtagset & (1 << (self.curtag - 1))
        if not in_view:
            self.prevtag = self.curtag
            self.curtag = _lowest_bit(newtagset) + 1
        self._apply_pertag()
        return True

    def set_mfact(self, value: float) -> bool:
        """Change the master area factor.

        Values below 1.0 are added to the current factor; larger ones set it
        to ``value - 1.0``. Results outside 0.05..0.95 and floating layouts
        are refused (returns False).
        """
        if self.layout.floating:
            return False
        factor = value + self.mfact if value < 1.0 else value - 1.0
        if factor < _MFACT_MIN or factor > _MFACT_MAX:
            return False
        self.mfact = self._current.mfact = factor
        return True

    def inc_nmaster(self, delta: int) -> int:
        """Change the number of master clients, never below zero."""
        self.nmaster = self._current.nmaster = max(self.nmaster + delta, 0)
        return self.nmaster

    def set_layout(self, layout: Optional[Layout]) -> None:
        """Select ``layout``, or switch back to the other layout with None."""
        if layout is None or layout is not self.layout:
            self.sellt ^= 1
            self._current.sellt = self.sellt
        if layout is not None:
            self.lt[self.sellt] = layout
            self._current.layouts[self.sellt] = layout
        self.symbol = self._clip(self.layout.symbol)

    def cycle_layout(self, direction: int) -> Layout:
        """Select the next (positive) or previous layout, wrapping around."""
        try:
            index = next(
                i for i, layout in enumerate(self.layouts) if layout is self.layout
            )
        except StopIteration:
            raise ValueError("the selected layout is not among the layouts") from None
        step = 1 if direction > 0 else -1
        chosen = self.layouts[(index + step) % len(self.layouts)]
        self.set_layout(chosen)
        return chosen

    def toggle_bar(self) -> bool:
        """Show or hide the bar for the current tag; return whether it shows."""
        self.showbar = not self.showbar
        self._current.showbar = self.showbar
        return self.showbar