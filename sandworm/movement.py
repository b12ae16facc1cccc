"""
Movement planner.

Computes single-segment steps and decides where the head goes next:
player input first, then the current heading, then a random perpendicular
escape when the heading runs into the edge of the board.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Optional, Sequence

import numpy as np

from sandworm.definitions import Coordinates, Direction, GameField, NextMove, WormSegment
from sandworm.errors import AllMovesInvalid, InvalidArgument, MoveDeterminationFailed, SandwormError
from sandworm.validation import filter_valid_moves, is_boundary_collision, is_valid_move

logger = logging.getLogger(__name__)

# Row / column deltas for each compass direction.
DIR_DELTA = {
    Direction.UP:    (-1,  0),
    Direction.DOWN:  ( 1,  0),
    Direction.LEFT:  ( 0, -1),
    Direction.RIGHT: ( 0,  1),
}

OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def _require_direction(direction, message: str) -> None:
    if not isinstance(direction, Direction):
        raise InvalidArgument(message)


def compute_next_move(coordinates: Coordinates, direction: Direction) -> NextMove:
    """One step from *coordinates* toward *direction*. Bounds are not checked."""
    if coordinates is None:
        raise InvalidArgument("Cannot get next move. Invalid coordinates or direction.")
    _require_direction(direction, "Cannot get next move. Invalid coordinates or direction.")

    dr, dc = DIR_DELTA[direction]
    return NextMove(direction=direction,
                    coordinates=Coordinates(coordinates.row + dr, coordinates.column + dc))


def opposite_direction(direction: Direction) -> Direction:
    _require_direction(direction, "Cannot return opposite direction. Invalid direction.")
    return OPPOSITE[direction]


def randomized_perpendicular_options(direction: Direction,
                                     rng: Optional[np.random.Generator] = None) -> List[Direction]:
    """The two directions perpendicular to *direction*, order decided by a coin flip."""
    _require_direction(direction, "Cannot get possible directions. Missing current direction.")

    if direction.is_horizontal:
        options = [Direction.UP, Direction.DOWN]
    else:
        options = [Direction.LEFT, Direction.RIGHT]

    rng = rng if rng is not None else np.random.default_rng()
    if rng.random() < 0.5:
        return options
    return options[::-1]


def _with_tile(move: NextMove, game_field: GameField) -> NextMove:
    """Attach the destination tile when the move stays on the board."""
    if is_boundary_collision(move, game_field):
        return move
    return replace(move, tile=game_field.tile_grid[move.coordinates.row][move.coordinates.column])


def randomized_fallback_move(game_field: GameField, coordinates: Coordinates, direction: Direction,
                             rng: Optional[np.random.Generator] = None) -> NextMove:
    """
    Turn left or right at random to get out of the way of a blocked heading.

    The first valid option wins; randomness comes from the option order.
    """
    if coordinates is None:
        raise InvalidArgument("Cannot get random next move. Invalid coordinates.")

    options = [compute_next_move(coordinates, d) for d in randomized_perpendicular_options(direction, rng)]
    valid = filter_valid_moves(options, game_field)
    if not valid:
        tried = ", ".join(
            f"{m.direction.value}->({m.coordinates.row}, {m.coordinates.column})" for m in options
        )
        raise AllMovesInvalid(f"All next moves are invalid: {tried}")

    logger.debug("Heading %s blocked, turning %s.", direction.value, valid[0].direction.value)
    return _with_tile(valid[0], game_field)


def determine_head_next_move(game_field: GameField,
                             segments: Sequence[WormSegment],
                             default_direction: Direction,
                             input_direction: Optional[Direction] = None,
                             rng: Optional[np.random.Generator] = None) -> NextMove:
    """
    Decide the head's move for this tick.

    Parameters
    ----------
    game_field : GameField
        The board as it stands before the tick.
    segments : sequence of WormSegment
        The worm, head first. Must not be empty.
    default_direction : Direction
        The direction the head moved last tick.
    input_direction : Direction or None
        Latest player input. Used when it leads to a valid tile.
    rng : numpy.random.Generator or None
        Source of the fallback coin flip.

    Raises
    ------
    InvalidArgument
        On missing inputs.
    MoveDeterminationFailed
        When no move could be found; the original error is chained.
    """
    if game_field is None or not segments or default_direction is None:
        raise InvalidArgument("Cannot determine next move. Invalid game field, sandworm or direction.")
    _require_direction(default_direction,
                       "Cannot determine next move. Invalid game field, sandworm or direction.")

    head = segments[0].location
    try:
        if input_direction is not None:
            input_move = compute_next_move(head, input_direction)
            if is_valid_move(input_move, game_field):
                return _with_tile(input_move, game_field)

        default_move = compute_next_move(head, default_direction)
        if is_boundary_collision(default_move, game_field):
            return randomized_fallback_move(game_field, head, default_direction, rng)
        return _with_tile(default_move, game_field)
    except SandwormError as e:
        raise MoveDeterminationFailed(f"Issue occurred while determining the next move: {e}") from e
