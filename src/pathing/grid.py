# traversability oracles over simple grids
# src/pathing/grid.py
"""
Traversability oracles.

This module does not know anything about search. It only:
- Answers "may this cell be entered" for the search strategies.
- Loads and renders small ASCII maps for the CLI and tests.

ASCII map format, one row per line, y growing downwards:
  '.'  open cell
  '#'  blocked cell
  'S'  open cell marking the default origin
  'T'  open cell marking the default target
Blank lines are ignored; every row must have the same width.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, FrozenSet, Iterable, List, Optional, Sequence

from spec.types import Position

OPEN = "."
BLOCKED = "#"
ORIGIN_MARK = "S"
TARGET_MARK = "T"
PATH_MARK = "*"

_VALID = {OPEN, BLOCKED, ORIGIN_MARK, TARGET_MARK}


@dataclass(frozen=True)
class GridMap:
    """
    Bounded rectangular grid.

    A position is traversable when it lies inside [0, width) x [0, height)
    and is not in `blocked`.
    """

    width: int
    height: int
    blocked: FrozenSet[Position] = field(default_factory=frozenset)
    origin: Optional[Position] = None
    target: Optional[Position] = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {self.width}x{self.height}")

    # ------------------------------------------------------------------
    # Core queries
    # ------------------------------------------------------------------

    def in_bounds(self, position: Position) -> bool:
        return 0 <= position.x < self.width and 0 <= position.y < self.height

    def traversable(self, position: Position) -> bool:
        return self.in_bounds(position) and position not in self.blocked

    def with_blocked(self, positions: Iterable[Position]) -> "GridMap":
        """Return a copy with extra blocked cells."""
        return GridMap(
            width=self.width,
            height=self.height,
            blocked=self.blocked | frozenset(positions),
            origin=self.origin,
            target=self.target,
        )

    # ------------------------------------------------------------------
    # ASCII I/O
    # ------------------------------------------------------------------

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "GridMap":
        rows = [line.rstrip("\r\n") for line in lines]
        rows = [row for row in rows if row.strip()]
        if not rows:
            raise ValueError("Map is empty")

        width = len(rows[0])
        blocked = set()
        origin: Optional[Position] = None
        target: Optional[Position] = None

        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(
                    f"Row {y} has width {len(row)}, expected {width}"
                )
            for x, ch in enumerate(row):
                if ch not in _VALID:
                    raise ValueError(f"Unexpected map character {ch!r} at ({x}, {y})")
                if ch == BLOCKED:
                    blocked.add(Position(x, y))
                elif ch == ORIGIN_MARK:
                    if origin is not None:
                        raise ValueError("Map has more than one origin marker")
                    origin = Position(x, y)
                elif ch == TARGET_MARK:
                    if target is not None:
                        raise ValueError("Map has more than one target marker")
                    target = Position(x, y)

        return cls(
            width=width,
            height=len(rows),
            blocked=frozenset(blocked),
            origin=origin,
            target=target,
        )

    @classmethod
    def from_file(cls, path: Path) -> "GridMap":
        if not path.exists():
            raise FileNotFoundError(f"Missing map file: {path}")
        with path.open("r", encoding="utf-8") as f:
            return cls.from_lines(f)

    def render(self, path: Sequence[Position] = ()) -> List[str]:
        """Draw the map as text rows, marking `path` cells with '*'."""
        on_path = set(path)
        rows: List[str] = []
        for y in range(self.height):
            chars = []
            for x in range(self.width):
                pos = Position(x, y)
                if pos == self.origin:
                    chars.append(ORIGIN_MARK)
                elif pos == self.target:
                    chars.append(TARGET_MARK)
                elif pos in self.blocked:
                    chars.append(BLOCKED)
                elif pos in on_path:
                    chars.append(PATH_MARK)
                else:
                    chars.append(OPEN)
            rows.append("".join(chars))
        return rows


@dataclass(frozen=True)
class PredicateOracle:
    """Adapts a plain `fn(position) -> bool` to the oracle protocol."""

    fn: Callable[[Position], bool]

    def traversable(self, position: Position) -> bool:
        return bool(self.fn(position))
