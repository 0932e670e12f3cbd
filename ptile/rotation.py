"""
Strategy Rotation

Cycles through a fixed list of strategies, one per invocation.
"""

from __future__ import annotations
import logging
from typing import List, Optional, Sequence, TYPE_CHECKING

from pubsub import pub

from . import topics

if TYPE_CHECKING:
    from .fetchers import BufferFetcher
    from .host import Host, Pane

log = logging.getLogger(__name__)


class StrategyRotation:
    """
    Rotation over a fixed, ordered list of strategies.

    Holds the strategy list and the last executed strategy. Successive
    ``run()`` calls without an explicit strategy visit every configured
    strategy in order and wrap around; the first call uses the first one.

    When constructed with ``subscribe=True`` the rotation also answers the
    CMD_TILE and CMD_TILE_REVERSE commands. It publishes STRATEGY_EXECUTED
    after every successful run.
    """

    def __init__(
        self,
        host: "Host",
        strategies: Sequence["BufferFetcher"],
        subscribe: bool = False,
    ):
        """Initialize the rotation.

        Args:
            host: Host the strategies tile
            strategies: Strategies in rotation order
            subscribe: Whether to listen for tiling commands on the bus

        Raises:
            ValueError: If ``strategies`` is empty
        """
        if not strategies:
            raise ValueError("Strategy rotation needs at least one strategy")

        self.host = host
        self.strategies = tuple(strategies)
        self._last_executed: Optional["BufferFetcher"] = None
        self._subscribed = False

        if subscribe:
            self._setup_subscriptions()

    def _setup_subscriptions(self):
        """Subscribe to tiling commands."""
        pub.subscribe(self._on_tile, topics.CMD_TILE)
        pub.subscribe(self._on_tile_reverse, topics.CMD_TILE_REVERSE)
        self._subscribed = True

    @property
    def last_executed(self) -> Optional["BufferFetcher"]:
        """The strategy of the last successful run, or None."""
        return self._last_executed

    def _step(self, current: Optional["BufferFetcher"], direction: int):
        if current is None:
            current = (
                self._last_executed
                if self._last_executed is not None
                else self.strategies[-1]
            )

        try:
            idx = self.strategies.index(current)
        except ValueError:
            # Unknown strategy (one-off run or removed): restart the rotation
            return self.strategies[0]

        return self.strategies[(idx + direction) % len(self.strategies)]

    def next_strategy(
        self, current: Optional["BufferFetcher"] = None
    ) -> "BufferFetcher":
        """
        Strategy that follows ``current`` in the rotation.

        Args:
            current: Reference strategy, defaults to the last executed one
                (or the last configured one if nothing has run yet)

        Returns:
            The successor, wrapping to the first strategy; the first strategy
            if ``current`` is not part of the rotation
        """
        return self._step(current, 1)

    def previous_strategy(
        self, current: Optional["BufferFetcher"] = None
    ) -> "BufferFetcher":
        """Strategy that precedes ``current``; same fallback as next_strategy."""
        if current is None and self._last_executed is None:
            return self.strategies[0]
        return self._step(current, -1)

    def run(
        self,
        window_count: Optional[int] = None,
        strategy: Optional["BufferFetcher"] = None,
        direction: int = 1,
    ) -> List["Pane"]:
        """
        Tile the host with a strategy and record it as last executed.

        Args:
            window_count: Pane count to request, defaults to the number of
                visible panes
            strategy: Strategy to run, defaults to the next (or, with
                ``direction=-1``, previous) one in the rotation
            direction: Rotation direction used when ``strategy`` is None

        Returns:
            The panes that were laid out
        """
        if window_count is None:
            window_count = len(self.host.visible_panes())
        if strategy is None:
            if direction < 0:
                strategy = self.previous_strategy()
            else:
                strategy = self.next_strategy()

        log.debug("Running strategy %s with %d pane(s)", strategy.name, window_count)
        panes = strategy.execute(self.host, window_count)
        self._last_executed = strategy

        pub.sendMessage(topics.STRATEGY_EXECUTED, strategy=strategy, panes=panes)
        return panes

    # Command event handlers
    def _on_tile(self, window_count=None, strategy=None):
        """Handle CMD_TILE command."""
        self.run(window_count=window_count, strategy=strategy)

    def _on_tile_reverse(self, window_count=None):
        """Handle CMD_TILE_REVERSE command."""
        self.run(window_count=window_count, direction=-1)

    def unsubscribe(self):
        """Stop listening for tiling commands."""
        if not self._subscribed:
            return
        pub.unsubscribe(self._on_tile, topics.CMD_TILE)
        pub.unsubscribe(self._on_tile_reverse, topics.CMD_TILE_REVERSE)
        self._subscribed = False
