"""
Move validation: boundary collisions and the head-into-neck reversal guard.
"""

from __future__ import annotations

from typing import List, Sequence

from sandworm.definitions import GameField, NextMove, SegmentData, Tile, WormAnatomy
from sandworm.errors import InsufficientCandidates, InvalidArgument

# The segment right behind the head. Only this one blocks a move.
NECK_KEY = 1


def is_boundary_collision(next_move: NextMove, game_field: GameField) -> bool:
    if next_move is None or next_move.coordinates is None or game_field is None or game_field.board_size is None:
        raise InvalidArgument("Cannot check for boundary collision. Invalid next move or game field.")

    row, column = next_move.coordinates.row, next_move.coordinates.column
    size = game_field.board_size
    return not (0 <= row <= size.rows - 1) or not (0 <= column <= size.columns - 1)


def is_reversing_direction(tile: Tile) -> bool:
    """
    True when *tile* is the neck segment, i.e. the move would fold the head
    straight back onto the body.

    Other body segments are not checked here.
    """
    if tile is None:
        raise InvalidArgument("Cannot determine if the sandworm is reversing. Invalid tile.")
    return (tile.type == WormAnatomy.BODY
            and isinstance(tile.data, SegmentData)
            and tile.data.key == NECK_KEY)


def is_valid_move(next_move: NextMove, game_field: GameField) -> bool:
    if (next_move is None or next_move.coordinates is None
            or game_field is None or game_field.tile_grid is None):
        raise InvalidArgument("Cannot validate move. Invalid next move or game field.")

    if is_boundary_collision(next_move, game_field):
        return False

    target = game_field.tile_grid[next_move.coordinates.row][next_move.coordinates.column]
    return not is_reversing_direction(target)


def filter_valid_moves(candidates: Sequence[NextMove], game_field: GameField) -> List[NextMove]:
    """Keep the candidates that pass is_valid_move, in their original order."""
    if game_field is None:
        raise InvalidArgument("Cannot filter moves. Invalid game field.")
    if candidates is None or len(candidates) < 2:
        raise InsufficientCandidates("There must be more than one possible move to validate.")
    return [move for move in candidates if is_valid_move(move, game_field)]
