"""
Shared types for the sandworm engine.

Coordinates are (row, column) with row 0 at the top of the board, which
matches how the board is indexed: board[row][column].
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Tuple, Union


class Direction(enum.Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)


class GroundTexture(enum.Enum):
    SAND = "sand"
    FOOD = "food"


class WormAnatomy(enum.Enum):
    HEAD = "head"
    BODY = "body"
    TAIL = "tail"


TileType = Union[GroundTexture, WormAnatomy]


@dataclass(frozen=True)
class Coordinates:
    row: int
    column: int


@dataclass(frozen=True)
class Dimension:
    rows: int
    columns: int


# ---------- Tile data variants ----------
@dataclass(frozen=True)
class GroundData:
    """Payload of SAND and FOOD tiles."""
    location: Coordinates


@dataclass(frozen=True)
class SegmentData:
    """Payload of HEAD, BODY and TAIL tiles; key is the segment index."""
    location: Coordinates
    key: int


@dataclass(frozen=True)
class Tile:
    type: TileType
    data: Union[GroundData, SegmentData]


Board = Tuple[Tuple[Tile, ...], ...]
WormPath = Tuple[Direction, ...]


@dataclass(frozen=True)
class GameField:
    tile_grid: Board
    board_size: Dimension


@dataclass(frozen=True)
class WormSegment:
    key: int
    part: WormAnatomy
    location: Coordinates


@dataclass(frozen=True)
class NextMove:
    direction: Direction
    coordinates: Coordinates
    tile: Union[Tile, None] = None
