"""
ptile - pane tiling with rotating strategies

Picks panes from a host windowing environment and arranges them into one of
several layouts, cycling through a list of strategies on each invocation.

This package provides:
- The Host interface the engine drives (split, focus, show, balance)
- A lazy candidate pane sequence with filtering and padding
- Layouts (evenly split wide/tall, master left/right/top/bottom)
- Buffer fetchers binding a pane count to a layout (strategies)
- A strategy rotation answering pub/sub tiling commands
- An in-memory host for demos and tests

Example usage:
    from ptile import MemoryHost, TilingConfig

    host = MemoryHost(["main.py", "test_main.py", "README.md"])
    rotation = TilingConfig().build_rotation(host)
    rotation.run()   # master-left
    rotation.run()   # tall-3

Or run the demo directly:
    python -m ptile main.py test_main.py README.md --times 4
"""

__version__ = "0.1.0"
__author__ = "pinpox"

from .host import Host, HostError, Pane, SplitDirection

from .panes import (
    MINIBUFFER_PATTERN,
    candidate_panes,
    default_filter,
    get_buffers,
    name_filter,
)

from .layouts import (
    Layout,
    CallableLayout,
    EvenlySplitLayout,
    MasterLayout,
    WIDE,
    TALL,
    MASTER_LEFT,
    MASTER_RIGHT,
    MASTER_TOP,
    MASTER_BOTTOM,
)

from .fetchers import (
    BufferFetcher,
    ArgumentFetcher,
    FixedFetcher,
    split_n,
    strategy_by_name,
    STRATEGIES,
    DEFAULT_STRATEGIES,
)

from .rotation import StrategyRotation
from .config import TilingConfig
from .memory_host import MemoryHost, MemoryPane, Area, RegionTooSmallError

from . import topics

__all__ = [
    # Version
    "__version__",
    # Host
    "Host",
    "HostError",
    "Pane",
    "SplitDirection",
    # Candidate panes
    "MINIBUFFER_PATTERN",
    "candidate_panes",
    "default_filter",
    "get_buffers",
    "name_filter",
    # Layouts
    "Layout",
    "CallableLayout",
    "EvenlySplitLayout",
    "MasterLayout",
    "WIDE",
    "TALL",
    "MASTER_LEFT",
    "MASTER_RIGHT",
    "MASTER_TOP",
    "MASTER_BOTTOM",
    # Strategies
    "BufferFetcher",
    "ArgumentFetcher",
    "FixedFetcher",
    "split_n",
    "strategy_by_name",
    "STRATEGIES",
    "DEFAULT_STRATEGIES",
    # Rotation and configuration
    "StrategyRotation",
    "TilingConfig",
    # In-memory host
    "MemoryHost",
    "MemoryPane",
    "Area",
    "RegionTooSmallError",
    # Event topics
    "topics",
]
