"""
Candidate Panes

Lazy, deduplicated, filtered sequence of panes a strategy can lay out.

Order of the sequence:
1. panes visible on the display surface, in host order
2. every other known pane, in host list order, skipping ones already seen
3. the focused pane, repeated forever (padding)

Padding guarantees a fetch never runs dry while at least one pane is
acceptable, so a strategy asking for more panes than exist shows some of
them twice instead of failing.
"""

from __future__ import annotations
import itertools
import logging
import re
from typing import Callable, Iterator, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .host import Host, Pane

log = logging.getLogger(__name__)

PaneFilter = Callable[["Pane"], bool]

# " *Minibuf-3*", "*Minibuf-1*<2>", ...
MINIBUFFER_PATTERN = re.compile(r"^ ?\*Minibuf-[0-9]*\*(<[0-9]+>)?$")


def name_filter(host: "Host", pattern=MINIBUFFER_PATTERN) -> PaneFilter:
    """Build a filter rejecting panes whose display name matches ``pattern``."""
    if isinstance(pattern, str):
        pattern = re.compile(pattern)

    def accept(pane: "Pane") -> bool:
        return pattern.match(host.pane_name(pane)) is None

    return accept


def default_filter(host: "Host") -> PaneFilter:
    """Filter used when a caller does not supply one: skip minibuffers."""
    return name_filter(host, MINIBUFFER_PATTERN)


def _known_panes(host: "Host") -> Iterator["Pane"]:
    """Visible panes, then the rest of the host's panes, each exactly once."""
    seen = set()
    for pane in host.visible_panes():
        if pane not in seen:
            seen.add(pane)
            yield pane
    for pane in host.all_panes():
        if pane not in seen:
            seen.add(pane)
            yield pane


def candidate_panes(
    host: "Host", pane_filter: Optional[PaneFilter] = None
) -> Iterator["Pane"]:
    """
    Produce the candidate sequence for ``host``.

    Each call returns a fresh generator; nothing is shared between calls.
    Host enumeration happens lazily, on first ``next()``.

    Args:
        host: Host to enumerate panes from
        pane_filter: Predicate a pane must satisfy, defaults to ``default_filter``

    Yields:
        Panes accepted by the filter. Infinite unless no pane is acceptable.
    """
    accept = pane_filter if pane_filter is not None else default_filter(host)
    focused = host.focused_pane()

    first = None
    for pane in filter(accept, _known_panes(host)):
        if first is None:
            first = pane
        yield pane

    if focused is not None and accept(focused):
        padding = focused
    else:
        padding = first

    if padding is None:
        log.debug("No acceptable pane to pad the candidate sequence with")
        return

    yield from itertools.repeat(padding)


def get_buffers(
    host: "Host", count: int, pane_filter: Optional[PaneFilter] = None
) -> List["Pane"]:
    """
    Take the first ``count`` candidate panes.

    A ``count`` below one is treated as one. The result is shorter than
    ``count`` only when the host has no acceptable pane at all, in which
    case it is empty.
    """
    count = max(count, 1)
    return list(itertools.islice(candidate_panes(host, pane_filter), count))
