"""Window rules: initial tags, floating and terminal settings by window name."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

from tilewm.tags import tag_mask

BROKEN = "broken"
"""Name used for a window class or instance the window did not set."""


@dataclass(frozen=True)
class Rule:
    """Settings for windows whose class, instance and title contain the given texts.

    A None field matches any window. ``monitor`` is a monitor number or -1.
    """

    class_name: Optional[str] = None
    instance: Optional[str] = None
    title: Optional[str] = None
    tags: int = 0
    isfloating: bool = False
    isterminal: bool = False
    noswallow: bool = False
    monitor: int = -1

    def matches(self, name: str, class_name: str, instance: str) -> bool:
        """Whether the rule applies to a window with these names."""
        return (
            (self.title is None or self.title in name)
            and (self.class_name is None or self.class_name in class_name)
            and (self.instance is None or self.instance in instance)
        )


@dataclass(frozen=True)
class RuleMatch:
    """The outcome of applying rules to a window.

    ``monitors`` lists the monitor numbers asked for by matching rules, in
    order; the last one that exists wins.
    """

    tags: int
    isfloating: bool = False
    isterminal: bool = False
    noswallow: bool = False
    monitors: Tuple[int, ...] = ()

    def select_monitor(self, available: Iterable[int]) -> Optional[int]:
        """The monitor to use among the ``available`` numbers, or None."""
        present = set(available)
        for number in reversed(self.monitors):
            if number in present:
                return number
        return None


def apply_rules(
    rules: Sequence[Rule],
    name: str,
    class_name: Optional[str],
    instance: Optional[str],
    default_tags: int,
    ntags: int,
) -> RuleMatch:
    """Apply every matching rule in order.

    Tags of matching rules accumulate; the other settings come from the
    last match. Without valid tags the window gets ``default_tags``.
    """
    mask = tag_mask(ntags)
    klass = class_name if class_name else BROKEN
    inst = instance if instance else BROKEN
    tags = 0
    isfloating = isterminal = noswallow = False
    monitors = []
    for rule in rules:
        if not rule.matches(name, klass, inst):
            continue
        isterminal = rule.isterminal
        noswallow = rule.noswallow
        isfloating = rule.isfloating
        tags |= rule.tags
        monitors.append(rule.monitor)
    tags = tags & mask if tags & mask else default_tags
    return RuleMatch(tags, isfloating, isterminal, noswallow, tuple(monitors))