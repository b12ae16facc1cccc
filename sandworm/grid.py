"""
Board model: building the sand grid, stamping tiles onto it and picking
random tiles by type.

Boards are tuples of row tuples. Nothing here mutates a board in place;
every write returns a new board that shares the untouched rows.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

import numpy as np

from sandworm.definitions import (
    Board,
    Coordinates,
    Dimension,
    GameField,
    GroundData,
    GroundTexture,
    SegmentData,
    Tile,
    WormAnatomy,
    WormPath,
    WormSegment,
)
from sandworm.errors import (
    InvalidArgument,
    InvalidDimension,
    InvalidQuery,
    InvalidTileSpec,
    MissingDimensions,
    NoMatchingTile,
)
from sandworm.movement import compute_next_move, opposite_direction

logger = logging.getLogger(__name__)


def _check_dimensions(dimensions: Optional[Dimension], message: str) -> None:
    if (dimensions is None or not dimensions.rows or not dimensions.columns
            or dimensions.rows <= 0 or dimensions.columns <= 0):
        raise InvalidDimension(message)


def _inside(dimensions: Dimension, coordinates: Coordinates) -> bool:
    return 0 <= coordinates.row < dimensions.rows and 0 <= coordinates.column < dimensions.columns


def _replace_tile(board: Board, tile: Tile) -> Board:
    """Return a copy of *board* with *tile* written at its own location."""
    row, column = tile.data.location.row, tile.data.location.column
    new_row = board[row][:column] + (tile,) + board[row][column + 1:]
    return board[:row] + (new_row,) + board[row + 1:]


# ---------- Tiles ----------
def place_tile(tile_type, coordinates: Coordinates, key: Optional[int] = None) -> Tile:
    """
    Construct a tile of *tile_type* at *coordinates*.

    Creature parts carry their segment *key*; ground textures ignore it.
    """
    if tile_type is None or coordinates is None:
        raise InvalidTileSpec("Cannot create a new tile. Invalid tile type or coordinates.")
    if isinstance(tile_type, WormAnatomy):
        if key is None:
            raise InvalidTileSpec("Cannot create a worm tile without a segment key.")
        return Tile(type=tile_type, data=SegmentData(location=coordinates, key=key))
    if isinstance(tile_type, GroundTexture):
        return Tile(type=tile_type, data=GroundData(location=coordinates))
    raise InvalidTileSpec(f"Cannot create a new tile. Unknown tile type {tile_type!r}.")


def place_segment_tile(board: Board, segment: WormSegment) -> Board:
    return _replace_tile(board, place_tile(segment.part, segment.location, key=segment.key))


# ---------- Boards ----------
def build_board(dimensions: Dimension) -> Board:
    """A rows x columns board of SAND tiles, each located at its own index."""
    _check_dimensions(dimensions, "Invalid board dimensions.")
    return tuple(
        tuple(place_tile(GroundTexture.SAND, Coordinates(r, c)) for c in range(dimensions.columns))
        for r in range(dimensions.rows)
    )


def create_game_field(dimensions: Dimension,
                      segments: Sequence[WormSegment],
                      food: Iterable[Coordinates]) -> GameField:
    """Build a sand board and stamp the worm and the food drops onto it."""
    _check_dimensions(dimensions, "Cannot create the game field. Invalid board dimensions.")
    if segments is None or food is None:
        raise InvalidArgument("Cannot create the game field. Invalid sandworm or food locations.")

    board = build_board(dimensions)
    for segment in segments:
        if not _inside(dimensions, segment.location):
            raise InvalidArgument(f"Sandworm segment {segment.key} lies outside the board.")
        board = place_segment_tile(board, segment)
    for location in food:
        if not _inside(dimensions, location):
            raise InvalidArgument(f"Food at ({location.row}, {location.column}) lies outside the board.")
        board = _replace_tile(board, place_tile(GroundTexture.FOOD, location))

    return GameField(tile_grid=board, board_size=dimensions)


def total_tiles(dimensions: Optional[Dimension]) -> int:
    if dimensions is None:
        raise MissingDimensions("Cannot calculate total tiles. Missing dimensions.")
    _check_dimensions(dimensions, "Cannot calculate total tiles. Invalid dimensions.")
    return dimensions.rows * dimensions.columns


def find_random_tile_by_type(board: Board, tile_type, rng: Optional[np.random.Generator] = None) -> Tile:
    """Pick uniformly among every tile of *tile_type* on the board."""
    if board is None or not isinstance(tile_type, (GroundTexture, WormAnatomy)):
        raise InvalidQuery("Cannot get a random tile. Invalid board or tile type.")
    matches = [tile for row in board for tile in row if tile.type == tile_type]
    if not matches:
        raise NoMatchingTile(f"Could not find a random tile with tile type {tile_type.value}.")
    rng = rng if rng is not None else np.random.default_rng()
    return matches[int(rng.integers(len(matches)))]


def add_drop_item(game_field: GameField, drop_type, coordinates: Coordinates) -> Board:
    """Return a new board with a fresh *drop_type* tile at *coordinates*."""
    if game_field is None or drop_type is None or coordinates is None:
        raise InvalidArgument("Cannot drop item onto the board. Invalid game field, drop type or coordinates.")
    if not _inside(game_field.board_size, coordinates):
        raise InvalidArgument("Cannot drop item onto the board. Coordinates lie outside the board.")
    return _replace_tile(game_field.tile_grid, place_tile(drop_type, coordinates))


# ---------- Growth ----------
def add_worm_segment(segments: Sequence[WormSegment], path: WormPath):
    """
    Grow the worm by one segment.

    A BODY copy of the tail goes in front of the tail, keys are renumbered,
    and the tail steps one tile back along its own path direction so the
    worm visibly gets longer.
    """
    if not segments or not path:
        raise InvalidArgument("Cannot add worm segment. Invalid sandworm segments or worm path.")

    tail_index = len(segments) - 1
    tail = segments[tail_index]
    if tail_index == 0:
        # A lone head stays the head; the new tail goes behind it.
        grown = [segments[0]]
    else:
        grown = list(segments[:tail_index]) + [
            WormSegment(key=tail_index, part=WormAnatomy.BODY, location=tail.location),
        ]
    behind = compute_next_move(tail.location, opposite_direction(path[tail_index])).coordinates
    grown.append(WormSegment(key=tail_index + 1, part=WormAnatomy.TAIL, location=behind))

    logger.debug("Sandworm grew to %d segments.", len(grown))
    return tuple(grown)
