"""
Tiling Configuration

Configuration is plain Python: build a TilingConfig in a script and hand
it to the rotation.
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from typing import List, Optional, Union, TYPE_CHECKING

from .panes import MINIBUFFER_PATTERN, PaneFilter, name_filter

if TYPE_CHECKING:
    from .fetchers import BufferFetcher
    from .host import Host


@dataclass
class TilingConfig:
    """Tiling configuration."""

    # Strategies in rotation order (default to the built-in rotation)
    strategies: Optional[List["BufferFetcher"]] = None

    # Alternatively, built-in strategy names, e.g. ["master-left", "tall-3"]
    strategy_names: Optional[List[str]] = None

    # Pane filter; when unset, panes whose name matches the pattern are skipped
    pane_filter: Optional[PaneFilter] = None
    ignore_pattern: Union[str, re.Pattern] = MINIBUFFER_PATTERN

    def __post_init__(self):
        """Validate strategies and compile the ignore pattern."""
        if self.strategies is not None and self.strategy_names is not None:
            raise ValueError("Set either strategies or strategy_names, not both")
        if self.strategies is not None and not self.strategies:
            raise ValueError("strategies must not be empty")
        if self.strategy_names is not None and not self.strategy_names:
            raise ValueError("strategy_names must not be empty")

        if isinstance(self.ignore_pattern, str):
            self.ignore_pattern = re.compile(self.ignore_pattern)

    def get_strategies(self) -> List["BufferFetcher"]:
        """Get configured strategies or the default rotation."""
        from .fetchers import DEFAULT_STRATEGIES, strategy_by_name

        if self.strategies is not None:
            return list(self.strategies)
        if self.strategy_names is not None:
            return [strategy_by_name(name) for name in self.strategy_names]
        return list(DEFAULT_STRATEGIES)

    def get_pane_filter(self, host: "Host") -> PaneFilter:
        """Get the configured pane filter, or one built from ignore_pattern."""
        if self.pane_filter is not None:
            return self.pane_filter
        return name_filter(host, self.ignore_pattern)

    def build_rotation(self, host: "Host", subscribe: bool = False):
        """
        Create the strategy rotation for ``host``.

        Strategies without a pane filter of their own get the configured one.

        Args:
            host: Host to tile
            subscribe: Whether the rotation listens for tiling commands

        Returns:
            A StrategyRotation over the configured strategies
        """
        from .rotation import StrategyRotation

        pane_filter = self.get_pane_filter(host)
        strategies = [
            strategy if strategy.pane_filter is not None
            else strategy.with_filter(pane_filter)
            for strategy in self.get_strategies()
        ]
        return StrategyRotation(host, strategies, subscribe=subscribe)
