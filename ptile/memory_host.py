"""
In-Memory Host

A self-contained host that models the display surface as a tree of split
regions. It behaves like a text editor frame:

- a split keeps focus on the original region; the new region comes right
  after it in focus order (to the right or below) and shows the same pane
- focus moves cycle through regions in reading order
- regions are sized in character cells, and a split that would leave a
  region smaller than the minimum size fails

Used by the command line demo and the test suite.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple, Union

from .host import Host, HostError, SplitDirection

log = logging.getLogger(__name__)


class RegionTooSmallError(HostError):
    """Raised when a split would produce a region below the minimum size."""


class UnknownPaneError(HostError):
    """Raised when asked to show a pane the host does not manage."""


@dataclass
class Area:
    """Area with position and dimensions."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0


@dataclass(eq=False)
class MemoryPane:
    """A pane managed by the in-memory host. Compared by identity."""

    name: str

    def __repr__(self) -> str:
        return f"MemoryPane({self.name!r})"


@dataclass(eq=False)
class Region:
    """A leaf of the split tree, showing one pane."""

    pane: MemoryPane
    weight: float = 1.0
    parent: Optional["SplitNode"] = None


@dataclass(eq=False)
class SplitNode:
    """An inner node of the split tree."""

    direction: SplitDirection
    children: List[Union[Region, "SplitNode"]] = field(default_factory=list)
    weight: float = 1.0
    parent: Optional["SplitNode"] = None


Node = Union[Region, SplitNode]


class MemoryHost(Host):
    """Host backed by an in-memory split tree."""

    def __init__(
        self,
        names: Iterable[str],
        area: Optional[Area] = None,
        min_width: int = 10,
        min_height: int = 4,
    ):
        """Initialize the host with one region showing the first pane.

        Args:
            names: Pane names, in buffer list order
            area: Display surface size in cells (default 160x48)
            min_width: Narrowest region a split may produce
            min_height: Lowest region a split may produce

        Raises:
            ValueError: If no pane names are given
        """
        self.panes: List[MemoryPane] = [MemoryPane(name) for name in names]
        if not self.panes:
            raise ValueError("MemoryHost needs at least one pane")

        self.area = area or Area(0, 0, 160, 48)
        self.min_width = min_width
        self.min_height = min_height

        self.root: Node = Region(self.panes[0])
        self.focused: Region = self.root

    def pane(self, name: str) -> MemoryPane:
        """Look up a pane by name."""
        for pane in self.panes:
            if pane.name == name:
                return pane
        raise KeyError(name)

    def regions(self) -> List[Region]:
        """All regions in focus (reading) order."""
        result: List[Region] = []

        def walk(node: Node):
            if isinstance(node, Region):
                result.append(node)
            else:
                for child in node.children:
                    walk(child)

        walk(self.root)
        return result

    # Host primitives

    def visible_panes(self) -> List[MemoryPane]:
        return [region.pane for region in self.regions()]

    def all_panes(self) -> List[MemoryPane]:
        return list(self.panes)

    def focused_pane(self) -> MemoryPane:
        return self.focused.pane

    def pane_name(self, pane: MemoryPane) -> str:
        return pane.name

    def split_vertically(self):
        self._split(SplitDirection.WIDE)

    def split_horizontally(self):
        self._split(SplitDirection.TALL)

    def move_focus(self, offset: int):
        regions = self.regions()
        idx = regions.index(self.focused)
        self.focused = regions[(idx + offset) % len(regions)]

    def show_pane(self, pane: MemoryPane):
        if pane not in self.panes:
            raise UnknownPaneError(f"Pane not managed by this host: {pane!r}")
        self.focused.pane = pane

    def delete_other_regions(self):
        self.focused.parent = None
        self.focused.weight = 1.0
        self.root = self.focused

    def balance(self):
        def walk(node: Node):
            if isinstance(node, SplitNode):
                for child in node.children:
                    child.weight = 1.0
                    walk(child)

        walk(self.root)

    # Splitting

    def _split(self, direction: SplitDirection):
        area = self.geometry()[self.focused]
        if direction == SplitDirection.WIDE:
            if area.height // 2 < self.min_height:
                raise RegionTooSmallError(
                    f"Region {area.height} cells high is too small to split"
                )
        elif area.width // 2 < self.min_width:
            raise RegionTooSmallError(
                f"Region {area.width} cells wide is too small to split"
            )

        old = self.focused
        log.debug("Splitting %s region showing %s", direction.value, old.pane.name)
        new = Region(old.pane)
        parent = old.parent

        if parent is not None and parent.direction == direction:
            # Same orientation: the new region becomes a sibling
            old.weight /= 2
            new.weight = old.weight
            new.parent = parent
            parent.children.insert(parent.children.index(old) + 1, new)
            return

        node = SplitNode(direction, weight=old.weight, parent=parent)
        if parent is None:
            self.root = node
        else:
            parent.children[parent.children.index(old)] = node

        for child in (old, new):
            child.weight = 1.0
            child.parent = node
            node.children.append(child)

    # Geometry

    def geometry(self, area: Optional[Area] = None) -> Dict[Region, Area]:
        """Calculate the area of every region for the given surface size."""
        result: Dict[Region, Area] = {}

        def place(node: Node, box: Area):
            if isinstance(node, Region):
                result[node] = box
                return

            total = sum(child.weight for child in node.children)
            span = box.height if node.direction == SplitDirection.WIDE else box.width
            offset = 0
            for i, child in enumerate(node.children):
                if i == len(node.children) - 1:
                    size = span - offset
                else:
                    size = int(span * child.weight / total)

                if node.direction == SplitDirection.WIDE:
                    place(child, Area(box.x, box.y + offset, box.width, size))
                else:
                    place(child, Area(box.x + offset, box.y, size, box.height))
                offset += size

        place(self.root, area or self.area)
        return result

    def describe(self) -> List[Tuple[str, Area, bool]]:
        """(pane name, area, focused) for every region in focus order."""
        geometry = self.geometry()
        return [
            (region.pane.name, geometry[region], region is self.focused)
            for region in self.regions()
        ]

    def render(self) -> str:
        """Human readable listing of the current regions."""
        lines = []
        for name, area, focused in self.describe():
            marker = "*" if focused else " "
            lines.append(
                f"{marker} {name:<24} {area.width:>4}x{area.height:<4}"
                f" at {area.x},{area.y}"
            )
        return "\n".join(lines)
