# src/cli/find_path.py
"""
Command line pathfinder over an ASCII map.

    gridpath maps/room.txt --origin 0,0 --target 4,4 --render

Prints the SearchResult as JSON. Exit status is 0 when the target was
reached (or origin == target) and 1 when no route exists.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from monitoring.bus import EventBus
from monitoring.events import EventType
from monitoring.logger import JsonFileLogger, log_event
from pathing.config import ALGORITHMS, PathfindingConfig, build_pathfinder, load_config
from pathing.grid import BLOCKED, ORIGIN_MARK, PATH_MARK, TARGET_MARK, GridMap
from pathing.heuristics import HEURISTICS
from pathing.logging_config import configure_logging
from spec.types import Position

log = logging.getLogger(__name__)

_STYLES = {
    BLOCKED: "bold white on grey23",
    ORIGIN_MARK: "bold green",
    TARGET_MARK: "bold red",
    PATH_MARK: "bold yellow",
}


def _position_arg(text: str) -> Position:
    try:
        return Position.parse(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridpath",
        description="Find the shortest walkable route on an ASCII grid map.",
    )
    parser.add_argument("map", type=Path, help="ASCII map file ('.' open, '#' blocked, S/T markers)")
    parser.add_argument("--origin", type=_position_arg, help="Origin as x,y (default: 'S' marker)")
    parser.add_argument("--target", type=_position_arg, help="Target as x,y (default: 'T' marker)")
    parser.add_argument("--config", type=Path, help="YAML config (default: config/pathfinding.yaml)")
    parser.add_argument("--algorithm", choices=ALGORITHMS, help="Override configured algorithm")
    parser.add_argument("--heuristic", choices=sorted(HEURISTICS), help="Override configured heuristic")
    parser.add_argument("--max-expansions", type=int, help="Give up after this many expanded nodes")
    parser.add_argument("--events-log", type=Path, help="Append search events as JSONL to this file")
    parser.add_argument("--render", action="store_true", help="Draw the map with the path highlighted")
    parser.add_argument("--log-level", help="Override configured log level")
    return parser


def render_map(grid: GridMap, path: Sequence[Position], origin: Position, target: Position) -> Panel:
    """Build a rich Panel showing the map with the path drawn in."""
    marked = GridMap(
        width=grid.width,
        height=grid.height,
        blocked=grid.blocked,
        origin=origin,
        target=target,
    )
    txt = Text()
    for row in marked.render(path):
        for ch in row:
            txt.append(ch, style=_STYLES.get(ch))
        txt.append("\n")
    title = f"{origin} -> {target}: {len(path)} step(s)" if path else f"{origin} -> {target}: no route"
    return Panel(txt, title=title, border_style="cyan", expand=False)


def _resolve_config(args: argparse.Namespace) -> PathfindingConfig:
    if args.config is not None:
        config = load_config(args.config)
    else:
        try:
            config = load_config()
        except FileNotFoundError:
            config = PathfindingConfig()

    return PathfindingConfig(
        algorithm=args.algorithm or config.algorithm,
        heuristic=args.heuristic or config.heuristic,
        heuristic_unit=config.heuristic_unit,
        max_expansions=args.max_expansions if args.max_expansions is not None else config.max_expansions,
        log_level=args.log_level or config.log_level,
        events_log=str(args.events_log) if args.events_log else config.events_log,
    )


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    console = console or Console()

    try:
        config = _resolve_config(args)
        grid = GridMap.from_file(args.map)
    except (FileNotFoundError, ValueError) as exc:
        parser.error(str(exc))

    # stdout carries the JSON result only.
    configure_logging(config.log_level, stream=sys.stderr)

    origin = args.origin or grid.origin
    target = args.target or grid.target
    if origin is None or target is None:
        parser.error("origin and target must be given or marked with S/T in the map")

    bus = EventBus()
    sink: Optional[JsonFileLogger] = None
    if config.events_log:
        sink = JsonFileLogger(Path(config.events_log), bus)

    try:
        finder = build_pathfinder(config, grid, bus=bus)
        result = finder.search(origin, target)
        log.info(
            "%s: %s -> %s reached=%s expanded=%d",
            config.algorithm,
            origin,
            target,
            result.reached,
            result.expanded,
        )
        log_event(
            bus=bus,
            module="cli.find_path",
            event_type=EventType.LOG,
            message="Search summary",
            payload=dict(result.to_dict(), algorithm=config.algorithm, map=str(args.map)),
        )
    finally:
        if sink is not None:
            sink.close()

    if args.render:
        console.print(render_map(grid, result.path, origin, target))
    console.print_json(json.dumps(result.to_dict(), sort_keys=True))

    return 0 if result.reached else 1


if __name__ == "__main__":
    raise SystemExit(main())
