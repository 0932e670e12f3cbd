"""
Layout Base Classes

Provides the Layout interface shared by every arrangement.

A layout receives an ordered list of panes and issues host split and
placement calls to tile them, starting from a display surface that holds a
single region with focus in it.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, List, TYPE_CHECKING

if TYPE_CHECKING:
    from ..host import Host, Pane


class Layout(ABC):
    """Abstract base class for pane layouts."""

    @abstractmethod
    def apply(self, host: "Host", panes: List["Pane"]):
        """
        Tile ``panes`` on the host display surface.

        Args:
            host: Host whose focused region is the area to tile
            panes: Panes to place, in order; may be empty
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Layout name for display."""
        pass


@dataclass(frozen=True)
class CallableLayout(Layout):
    """Wraps a bare arrangement function ``fn(host, panes)`` as a layout."""

    fn: Callable[["Host", List["Pane"]], None]

    @property
    def name(self) -> str:
        return getattr(self.fn, "__name__", "custom").replace("_", "-")

    def apply(self, host: "Host", panes: List["Pane"]):
        self.fn(host, panes)


def as_layout(layout) -> Layout:
    """Return ``layout`` unchanged, or wrap a plain function in a CallableLayout."""
    if isinstance(layout, Layout):
        return layout
    if callable(layout):
        return CallableLayout(layout)
    raise TypeError(f"Not a layout or arrangement function: {layout!r}")
