"""
Master Layout

One master pane on one side, remaining panes evenly split in the rest.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, List, TYPE_CHECKING

from .layout_base import Layout
from .layout_even import EvenlySplitLayout, WIDE, TALL

if TYPE_CHECKING:
    from ..host import Host, Pane

MasterFn = Callable[["Host"], None]


@dataclass(frozen=True)
class MasterLayout(Layout):
    """
    Master layout.

    ``master_fn`` performs the single split that carves out the master
    region and must leave focus on the remainder region. ``other`` then
    tiles the remaining panes inside that remainder.
    """

    master_fn: MasterFn
    other: EvenlySplitLayout
    label: str = "master"

    @property
    def name(self) -> str:
        return self.label

    def apply(self, host: "Host", panes: List["Pane"]):
        if not panes:
            return

        host.show_pane(panes[0])
        self.master_fn(host)
        self.other.apply(host, panes[1:])


# Hosts keep focus on the original (left/top) region after a split and
# show the same pane in both halves, so the master stays wherever focus
# does not go.


def split_master_left(host: "Host"):
    host.split_horizontally()
    host.move_focus(1)


def split_master_right(host: "Host"):
    host.split_horizontally()


def split_master_top(host: "Host"):
    host.split_vertically()
    host.move_focus(1)


def split_master_bottom(host: "Host"):
    host.split_vertically()


MASTER_LEFT = MasterLayout(split_master_left, WIDE, "master-left")
MASTER_RIGHT = MasterLayout(split_master_right, WIDE, "master-right")
MASTER_TOP = MasterLayout(split_master_top, TALL, "master-top")
MASTER_BOTTOM = MasterLayout(split_master_bottom, TALL, "master-bottom")
