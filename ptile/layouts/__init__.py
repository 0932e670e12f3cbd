"""
Layout System

Provides pane layout algorithms.
"""

from .layout_base import Layout, CallableLayout, as_layout
from .layout_even import EvenlySplitLayout, WIDE, TALL
from .layout_master import (
    MasterLayout,
    MASTER_LEFT,
    MASTER_RIGHT,
    MASTER_TOP,
    MASTER_BOTTOM,
)

__all__ = [
    # Base classes
    "Layout",
    "CallableLayout",
    "as_layout",
    # Layout implementations
    "EvenlySplitLayout",
    "MasterLayout",
    # Ready-made layouts
    "WIDE",
    "TALL",
    "MASTER_LEFT",
    "MASTER_RIGHT",
    "MASTER_TOP",
    "MASTER_BOTTOM",
]
