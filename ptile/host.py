"""
Host Interface

The windowing primitives the tiling engine needs from its host.

The engine never creates or destroys panes. It only reads pane identity and
hands references back to the host's placement primitives, so any
environment that can enumerate panes and split its display surface (a
terminal multiplexer, an editor frame, the in-memory host in
``ptile.memory_host``) can drive it by implementing this class.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from enum import Enum
from typing import Hashable, List

Pane = Hashable


class SplitDirection(Enum):
    """Visual effect of a split.

    Named after the resulting arrangement, not the split primitive:
    WIDE regions are full-width rows stacked top-to-bottom (vertical split),
    TALL regions are full-height columns side-by-side (horizontal split).
    """

    WIDE = "wide"
    TALL = "tall"


class HostError(Exception):
    """Base class for failures raised by host primitives."""


class Host(ABC):
    """Abstract host windowing environment."""

    @abstractmethod
    def visible_panes(self) -> List[Pane]:
        """Panes currently shown on the display surface, in host order."""
        pass

    @abstractmethod
    def all_panes(self) -> List[Pane]:
        """Every pane the host knows about, in host list order."""
        pass

    @abstractmethod
    def focused_pane(self) -> Pane:
        """Pane shown in the focused region."""
        pass

    @abstractmethod
    def pane_name(self, pane: Pane) -> str:
        """Display name of a pane."""
        pass

    @abstractmethod
    def split_vertically(self):
        """Split the focused region into two stacked regions."""
        pass

    @abstractmethod
    def split_horizontally(self):
        """Split the focused region into two side-by-side regions."""
        pass

    @abstractmethod
    def move_focus(self, offset: int):
        """Move focus ``offset`` regions along the host's region order."""
        pass

    @abstractmethod
    def show_pane(self, pane: Pane):
        """Display ``pane`` in the focused region."""
        pass

    @abstractmethod
    def delete_other_regions(self):
        """Discard every region except the focused one."""
        pass

    @abstractmethod
    def balance(self):
        """Equalize the sizes of all regions."""
        pass

    def split(self, direction: SplitDirection):
        """Split the focused region so the result has the given visual effect."""
        if direction == SplitDirection.WIDE:
            self.split_vertically()
        else:
            self.split_horizontally()
