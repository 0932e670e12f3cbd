"""
Command Line Demo

Tiles an in-memory display surface and prints the resulting regions.

Usage:
    python -m ptile main.py notes.md shell --times 4
    python -m ptile a b c d --strategy master-right
    python -m ptile a b --count 3 --strategy wide
"""

from __future__ import annotations
import argparse
import logging
import os
import re
import sys
from typing import List, Optional

from pubsub import pub

from . import topics
from .config import TilingConfig
from .fetchers import strategy_by_name
from .host import HostError
from .memory_host import Area, MemoryHost

log = logging.getLogger(__name__)


def debug_event_logger(topic=pub.AUTO_TOPIC, **kwargs):
    """Log all events published on the event bus."""
    data_str = ", ".join(f"{k}={v}" for k, v in kwargs.items())
    log.debug("EVENT: %s | %s", topic.getName(), data_str)


def parse_size(value: str) -> Area:
    """Parse a ``WIDTHxHEIGHT`` surface size."""
    match = re.match(r"^([0-9]+)x([0-9]+)$", value)
    if not match:
        raise argparse.ArgumentTypeError(f"Invalid size: {value}. Use WIDTHxHEIGHT")
    return Area(0, 0, int(match.group(1)), int(match.group(2)))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ptile", description="Tile panes on an in-memory display surface."
    )
    parser.add_argument("panes", nargs="+", help="pane names, in buffer list order")
    parser.add_argument(
        "--visible",
        type=int,
        default=None,
        help="number of panes shown before tiling (default: all)",
    )
    parser.add_argument(
        "--times", type=int, default=1, help="how many times to invoke the rotation"
    )
    parser.add_argument(
        "--strategy", default=None, help="run this strategy instead of rotating"
    )
    parser.add_argument(
        "--rotation",
        nargs="+",
        default=None,
        metavar="NAME",
        help="strategy names to rotate through",
    )
    parser.add_argument(
        "--count", type=int, default=None, help="pane count passed to the strategy"
    )
    parser.add_argument(
        "--reverse", action="store_true", help="rotate backwards through strategies"
    )
    parser.add_argument(
        "--size", type=parse_size, default=Area(0, 0, 160, 48), help="WIDTHxHEIGHT"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def show_initial_panes(host: MemoryHost, visible: int):
    """Split the surface evenly so the first ``visible`` panes are shown."""
    for pane in host.panes[1:visible]:
        host.split_horizontally()
        host.move_focus(1)
        host.show_pane(pane)
    host.balance()
    host.move_focus(1)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    if os.getenv("PTILE_DEBUG"):
        pub.subscribe(debug_event_logger, pub.ALL_TOPICS)

    try:
        strategy = strategy_by_name(args.strategy) if args.strategy else None
        config = TilingConfig(strategy_names=args.rotation)
        host = MemoryHost(args.panes, area=args.size)
        show_initial_panes(host, args.visible or len(host.panes))
        rotation = config.build_rotation(host, subscribe=True)
    except ValueError as e:
        print(f"ptile: {e}", file=sys.stderr)
        return 2
    except HostError as e:
        print(f"ptile: {e}", file=sys.stderr)
        return 1

    def report(strategy, panes):
        print(f"== {strategy.name} ({len(panes)} pane(s))")
        print(host.render())

    pub.subscribe(report, topics.STRATEGY_EXECUTED)

    try:
        for _ in range(max(args.times, 1)):
            if args.reverse:
                pub.sendMessage(topics.CMD_TILE_REVERSE, window_count=args.count)
            else:
                pub.sendMessage(
                    topics.CMD_TILE, window_count=args.count, strategy=strategy
                )
    except HostError as e:
        print(f"ptile: {e}", file=sys.stderr)
        return 1
    finally:
        rotation.unsubscribe()
        pub.unsubscribe(report, topics.STRATEGY_EXECUTED)
    return 0
