"""
Unit tests for the strategy rotation.
"""

import pytest
from pubsub import pub

from ptile import topics
from ptile.fetchers import ArgumentFetcher, FixedFetcher, split_n
from ptile.layouts import WIDE, TALL, MASTER_LEFT, MASTER_TOP
from ptile.rotation import StrategyRotation


def accept_all(pane):
    return True


@pytest.fixture
def strategies():
    """Three distinct strategies A, B, C."""
    return [
        ArgumentFetcher(MASTER_LEFT, pane_filter=accept_all),
        split_n(3, TALL).with_filter(accept_all),
        split_n(2, WIDE).with_filter(accept_all),
    ]


class FailingHost:
    """Wraps a host and fails every split."""

    def __init__(self, host):
        self._host = host

    def __getattr__(self, name):
        return getattr(self._host, name)

    def split_horizontally(self):
        raise RuntimeError("region too small")

    def split_vertically(self):
        raise RuntimeError("region too small")

    def split(self, direction):
        raise RuntimeError("region too small")


@pytest.mark.unit
class TestNextStrategy:
    """Test succession rules."""

    def test_first_call_starts_at_first(self, recording_host, strategies):
        rotation = StrategyRotation(recording_host(visible=["a"]), strategies)

        assert rotation.last_executed is None
        assert rotation.next_strategy() == strategies[0]

    def test_successor_and_wrap(self, recording_host, strategies):
        rotation = StrategyRotation(recording_host(), strategies)
        a, b, c = strategies

        assert rotation.next_strategy(a) == b
        assert rotation.next_strategy(b) == c
        assert rotation.next_strategy(c) == a

    def test_unknown_strategy_falls_back_to_first(self, recording_host, strategies):
        rotation = StrategyRotation(recording_host(), strategies)
        outsider = ArgumentFetcher(MASTER_TOP)

        assert rotation.next_strategy(outsider) == strategies[0]

    def test_lookup_by_value(self, recording_host, strategies):
        """An equal but distinct strategy object is found in the rotation."""
        rotation = StrategyRotation(recording_host(), strategies)

        assert rotation.next_strategy(split_n(3, TALL)) == strategies[2]

    def test_does_not_mutate_list(self, recording_host, strategies):
        rotation = StrategyRotation(recording_host(), strategies)
        before = rotation.strategies

        for strategy in strategies:
            rotation.next_strategy(strategy)

        assert rotation.strategies == before
        assert rotation.last_executed is None

    def test_previous_strategy(self, recording_host, strategies):
        rotation = StrategyRotation(recording_host(), strategies)
        a, b, c = strategies

        assert rotation.previous_strategy() == a
        assert rotation.previous_strategy(a) == c
        assert rotation.previous_strategy(c) == b

    def test_empty_rotation_rejected(self, recording_host):
        with pytest.raises(ValueError):
            StrategyRotation(recording_host(), [])


@pytest.mark.unit
class TestRun:
    """Test running strategies through the rotation."""

    def test_cycles_in_order(self, recording_host, strategies):
        """Repeated runs visit A, B, C, A, B, C regardless of pane count."""
        rotation = StrategyRotation(recording_host(visible=["a"]), strategies)

        visited = []
        for _ in range(6):
            rotation.run()
            visited.append(rotation.last_executed)

        assert visited == strategies + strategies

    def test_default_window_count_is_visible_count(self, recording_host, strategies):
        host = recording_host(visible=["a", "b"], others=["c", "d"])
        rotation = StrategyRotation(host, strategies)

        panes = rotation.run()

        assert panes == ["a", "b"]

    def test_explicit_window_count(self, recording_host, strategies):
        host = recording_host(visible=["a"], others=["b", "c"])
        rotation = StrategyRotation(host, strategies)

        assert rotation.run(window_count=3) == ["a", "b", "c"]

    def test_explicit_strategy(self, recording_host, strategies):
        """An explicit strategy runs and becomes the rotation reference."""
        rotation = StrategyRotation(recording_host(visible=["a"]), strategies)

        rotation.run(strategy=strategies[1])
        assert rotation.last_executed == strategies[1]

        rotation.run()
        assert rotation.last_executed == strategies[2]

    def test_out_of_band_strategy_restarts_rotation(self, recording_host, strategies):
        rotation = StrategyRotation(recording_host(visible=["a"]), strategies)
        one_off = FixedFetcher(MASTER_TOP, pane_filter=accept_all, count=4)

        rotation.run()
        rotation.run(strategy=one_off)
        assert rotation.last_executed == one_off

        rotation.run()
        assert rotation.last_executed == strategies[0]

    def test_reverse(self, recording_host, strategies):
        rotation = StrategyRotation(recording_host(visible=["a"]), strategies)

        visited = []
        for _ in range(4):
            rotation.run(direction=-1)
            visited.append(rotation.last_executed)

        a, b, c = strategies
        assert visited == [a, c, b, a]

    def test_host_failure_leaves_state(self, recording_host, strategies):
        """A failing host primitive aborts the run without recording it."""
        host = FailingHost(recording_host(visible=["a", "b"]))
        rotation = StrategyRotation(host, strategies)

        with pytest.raises(RuntimeError):
            rotation.run()

        assert rotation.last_executed is None
        assert rotation.next_strategy() == strategies[0]

    def test_no_panes_still_advances(self, recording_host, strategies):
        """A run with nothing to tile is a no-op, but still counts."""
        host = recording_host()
        rotation = StrategyRotation(host, strategies)

        assert rotation.run() == []
        assert host.layout_calls == []
        assert rotation.last_executed == strategies[0]


@pytest.mark.unit
class TestEvents:
    """Test the pub/sub command surface."""

    @pytest.fixture
    def subscribed(self, recording_host, strategies):
        rotation = StrategyRotation(
            recording_host(visible=["a", "b"]), strategies, subscribe=True
        )
        yield rotation
        rotation.unsubscribe()

    def test_cmd_tile(self, subscribed, strategies):
        pub.sendMessage(topics.CMD_TILE)
        pub.sendMessage(topics.CMD_TILE)

        assert subscribed.last_executed == strategies[1]

    def test_cmd_tile_with_arguments(self, subscribed, strategies, received_events):
        pub.sendMessage(topics.CMD_TILE, window_count=1, strategy=strategies[2])

        assert subscribed.last_executed == strategies[2]
        assert received_events == [(strategies[2], ["a", "b"])]

    def test_cmd_tile_reverse(self, subscribed, strategies):
        pub.sendMessage(topics.CMD_TILE)
        pub.sendMessage(topics.CMD_TILE_REVERSE)

        assert subscribed.last_executed == strategies[2]

    def test_strategy_executed_published(self, recording_host, strategies, received_events):
        rotation = StrategyRotation(recording_host(visible=["a"]), strategies)

        rotation.run()

        assert received_events == [(strategies[0], ["a"])]

    def test_unsubscribe(self, recording_host, strategies):
        rotation = StrategyRotation(
            recording_host(visible=["a"]), strategies, subscribe=True
        )
        rotation.unsubscribe()

        pub.sendMessage(topics.CMD_TILE)

        assert rotation.last_executed is None
