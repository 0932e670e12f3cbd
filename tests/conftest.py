"""
Shared pytest fixtures for ptile tests.
"""

import pytest
from pubsub import pub

from ptile.host import Host


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without a real host")


class RecordingHost(Host):
    """Host that records every primitive call instead of drawing anything.

    Panes are plain strings. Splits never change focus; move_focus and
    show_pane only update the recorded focused pane.
    """

    def __init__(self, visible=(), others=(), focused=None, names=None):
        self.visible = list(visible)
        self.others = list(others)
        self.focused = focused if focused is not None else (
            self.visible[0] if self.visible else None
        )
        self.names = names or {}
        self.calls = []

    def visible_panes(self):
        self.calls.append(("visible_panes",))
        return list(self.visible)

    def all_panes(self):
        self.calls.append(("all_panes",))
        return list(self.visible) + list(self.others)

    def focused_pane(self):
        return self.focused

    def pane_name(self, pane):
        return self.names.get(pane, pane)

    def split_vertically(self):
        self.calls.append(("split_vertically",))

    def split_horizontally(self):
        self.calls.append(("split_horizontally",))

    def move_focus(self, offset):
        self.calls.append(("move_focus", offset))

    def show_pane(self, pane):
        self.calls.append(("show_pane", pane))

    def delete_other_regions(self):
        self.calls.append(("delete_other_regions",))

    def balance(self):
        self.calls.append(("balance",))

    @property
    def layout_calls(self):
        """Calls that change the display surface, without enumeration."""
        return [
            call for call in self.calls if call[0] not in ("visible_panes", "all_panes")
        ]


@pytest.fixture
def recording_host():
    """Factory fixture for creating recording hosts."""
    return RecordingHost


@pytest.fixture
def received_events():
    """Collect STRATEGY_EXECUTED notifications for the duration of a test."""
    from ptile import topics

    events = []

    def listener(strategy, panes):
        events.append((strategy, panes))

    pub.subscribe(listener, topics.STRATEGY_EXECUTED)
    yield events
    pub.unsubscribe(listener, topics.STRATEGY_EXECUTED)
