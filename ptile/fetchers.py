"""
Buffer Fetchers

A buffer fetcher decides how many panes a strategy tiles and pulls them
from the candidate sequence; its bound layout decides how they are
arranged. A fetcher is the unit the rotation cycles through, so it is
also called a strategy.
"""

from __future__ import annotations
import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, TYPE_CHECKING

from .layouts import (
    Layout,
    as_layout,
    WIDE,
    TALL,
    MASTER_LEFT,
    MASTER_RIGHT,
    MASTER_TOP,
    MASTER_BOTTOM,
)
from .panes import PaneFilter, get_buffers

if TYPE_CHECKING:
    from .host import Host, Pane

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class BufferFetcher(ABC):
    """Abstract base class for buffer fetchers."""

    layout: Layout
    pane_filter: Optional[PaneFilter] = field(default=None, compare=False)

    def __post_init__(self):
        # Frozen dataclass: bypass __setattr__ to normalise the layout
        object.__setattr__(self, "layout", as_layout(self.layout))

    @abstractmethod
    def get_buffers(self, host: "Host", count: int) -> List["Pane"]:
        """
        Collect the panes this strategy tiles.

        Args:
            host: Host to collect panes from
            count: Pane count requested by the caller

        Returns:
            Panes in tiling order
        """
        pass

    @property
    def name(self) -> str:
        """Strategy name for display."""
        return self.layout.name

    def with_filter(self, pane_filter: Optional[PaneFilter]) -> "BufferFetcher":
        """Copy of this strategy using ``pane_filter``. Compares equal to it."""
        return replace(self, pane_filter=pane_filter)

    def execute(self, host: "Host", count: int) -> List["Pane"]:
        """
        Tile the host display surface with this strategy.

        Panes are collected before the surface is cleared, since collection
        reads the current visible panes.

        Args:
            host: Host to tile
            count: Pane count requested by the caller

        Returns:
            The panes that were laid out (empty if nothing was done)
        """
        buffers = self.get_buffers(host, count)
        if not buffers:
            log.debug("%s: no panes available, nothing to tile", self.name)
            return []

        host.delete_other_regions()
        self.layout.apply(host, buffers)
        log.debug("%s: tiled %d pane(s)", self.name, len(buffers))
        return buffers


@dataclass(frozen=True)
class ArgumentFetcher(BufferFetcher):
    """Tiles as many panes as the caller asks for."""

    def get_buffers(self, host: "Host", count: int) -> List["Pane"]:
        return get_buffers(host, count, self.pane_filter)


@dataclass(frozen=True)
class FixedFetcher(BufferFetcher):
    """Always tiles ``count`` panes, whatever the caller asks for."""

    count: int = 1

    def __post_init__(self):
        super().__post_init__()
        if self.count < 1:
            raise ValueError(f"Fixed pane count must be positive, got {self.count}")

    @property
    def name(self) -> str:
        if self.count == 1:
            return "one"
        return f"{self.layout.name}-{self.count}"

    def get_buffers(self, host: "Host", count: int) -> List["Pane"]:
        return get_buffers(host, self.count, self.pane_filter)


def split_n(count: int, layout: Layout) -> FixedFetcher:
    """Strategy tiling exactly ``count`` panes with ``layout``."""
    return FixedFetcher(layout, count=count)


MASTER_LEFT_STRATEGY = ArgumentFetcher(MASTER_LEFT)
MASTER_RIGHT_STRATEGY = ArgumentFetcher(MASTER_RIGHT)
MASTER_TOP_STRATEGY = ArgumentFetcher(MASTER_TOP)
MASTER_BOTTOM_STRATEGY = ArgumentFetcher(MASTER_BOTTOM)
WIDE_STRATEGY = ArgumentFetcher(WIDE)
TALL_STRATEGY = ArgumentFetcher(TALL)
ONE_STRATEGY = split_n(1, WIDE)

STRATEGIES: Dict[str, BufferFetcher] = {
    strategy.name: strategy
    for strategy in (
        MASTER_LEFT_STRATEGY,
        MASTER_RIGHT_STRATEGY,
        MASTER_TOP_STRATEGY,
        MASTER_BOTTOM_STRATEGY,
        WIDE_STRATEGY,
        TALL_STRATEGY,
        ONE_STRATEGY,
    )
}

DEFAULT_STRATEGIES: List[BufferFetcher] = [
    MASTER_LEFT_STRATEGY,
    split_n(3, TALL),
    split_n(2, WIDE),
    ONE_STRATEGY,
]

_SPLIT_N_NAME = re.compile(r"^(wide|tall)-([0-9]+)$")


def strategy_by_name(name: str) -> BufferFetcher:
    """
    Look up a built-in strategy by name.

    Accepts the registered names (``master-left``, ``wide``, ``one``, ...)
    and ``wide-N`` / ``tall-N`` for a fixed number of evenly split panes.

    Raises:
        ValueError: If the name is unknown
    """
    if name in STRATEGIES:
        return STRATEGIES[name]

    match = _SPLIT_N_NAME.match(name)
    if match:
        layout = WIDE if match.group(1) == "wide" else TALL
        return split_n(int(match.group(2)), layout)

    known = ", ".join(sorted(STRATEGIES))
    raise ValueError(f"Unknown strategy: {name}. Known: {known}, wide-N, tall-N")
