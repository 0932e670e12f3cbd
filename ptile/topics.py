"""
Event Topics for ptile

All pub/sub topics are defined here for easy discovery and documentation.
Topic naming convention: <category>.<action>
"""

# Command events (imperative - tell components to do something)
# These are triggered by user input (keybinds) or scripts

CMD_TILE = "cmd.tile"
"""Command: Tile with the next strategy in the rotation.

Optional params: window_count (int), strategy (BufferFetcher)."""

CMD_TILE_REVERSE = "cmd.tile_reverse"
"""Command: Tile with the previous strategy in the rotation.

Optional params: window_count (int)."""

# Notifications

STRATEGY_EXECUTED = "strategy.executed"
"""Published after a strategy tiled the display. Params: strategy, panes"""
