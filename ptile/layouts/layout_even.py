"""
Evenly Split Layout

Panes in equal rows (wide) or equal columns (tall).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, TYPE_CHECKING

from .layout_base import Layout
from ..host import SplitDirection

if TYPE_CHECKING:
    from ..host import Host, Pane


@dataclass(frozen=True)
class EvenlySplitLayout(Layout):
    """
    Evenly split layout.

    Every pane gets its own region along a single axis, then all regions
    are balanced to the same size.
    """

    direction: SplitDirection = SplitDirection.WIDE

    @property
    def name(self) -> str:
        return self.direction.value

    def apply(self, host: "Host", panes: List["Pane"]):
        if not panes:
            return

        host.show_pane(panes[0])
        for pane in panes[1:]:
            host.split(self.direction)
            host.move_focus(1)
            host.show_pane(pane)

        host.balance()
        # Leave focus on the region after the last placed one
        host.move_focus(1)


WIDE = EvenlySplitLayout(SplitDirection.WIDE)
TALL = EvenlySplitLayout(SplitDirection.TALL)
