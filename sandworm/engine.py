"""
Tick reducer for the sandworm game.

GameState is an immutable snapshot; tick() takes one and returns the next,
so a renderer can hold on to any state it was handed without it changing
under its feet.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional

import numpy as np

from sandworm.config import SPEED_MS, Params, load_params
from sandworm.definitions import (
    Direction,
    GameField,
    GroundTexture,
    WormAnatomy,
    WormPath,
    WormSegment,
)
from sandworm.errors import NoMatchingTile, SandwormError
from sandworm.grid import (
    add_drop_item,
    add_worm_segment,
    create_game_field,
    find_random_tile_by_type,
    place_segment_tile,
)
from sandworm.movement import compute_next_move, determine_head_next_move, opposite_direction
from sandworm.navigation import advance_path, direction_for_segment, extend_path, initialize_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameState:
    field: GameField
    segments: tuple          # WormSegment, head first
    path: WormPath
    score: int = 0
    food_eaten: int = 0
    speed_ms: int = SPEED_MS
    tick_count: int = 0
    game_over: bool = False
    game_won: bool = False
    error: Optional[str] = None

    @property
    def head(self) -> WormSegment:
        return self.segments[0]

    @property
    def finished(self) -> bool:
        return self.game_over or self.game_won


def new_game(params: Optional[Params] = None) -> GameState:
    """Fresh state from the configured layout."""
    params = params if params is not None else load_params()
    field = create_game_field(params.dimensions, params.segments, params.food)
    path = initialize_path(len(params.segments), params.start_direction)
    logger.info("New game on %dx%d board, sandworm length %d.",
                params.dimensions.rows, params.dimensions.columns, len(params.segments))
    return GameState(field=field, segments=tuple(params.segments), path=path, speed_ms=params.speed_ms)


def tick(state: GameState,
         input_direction: Optional[Direction] = None,
         params: Optional[Params] = None,
         rng: Optional[np.random.Generator] = None) -> GameState:
    """
    Advance the game by one tick.

    Finished games are returned as they are. Any engine error ends the game
    with the error message recorded on the returned state.
    """
    if state.finished:
        return state
    params = params if params is not None else Params()
    rng = rng if rng is not None else np.random.default_rng()

    try:
        return _advance(state, input_direction, params, rng)
    except SandwormError as e:
        logger.warning("Tick %d failed: %s", state.tick_count + 1, e)
        return replace(state, game_over=True, error=str(e), tick_count=state.tick_count + 1)


def _advance(state: GameState, input_direction, params: Params, rng) -> GameState:
    field = state.field
    head_move = determine_head_next_move(field, state.segments, state.path[0], input_direction, rng)
    path = advance_path(head_move.direction, state.path)

    # Move every segment along its own path entry.
    moved = []
    for segment in state.segments:
        if segment.key == 0:
            location = head_move.coordinates
        else:
            location = compute_next_move(segment.location, direction_for_segment(path, segment)).coordinates
        moved.append(replace(segment, location=location))
    segments = tuple(moved)

    target = head_move.tile
    if target is not None and target.type == WormAnatomy.BODY:
        logger.info("Sandworm ran into itself at tick %d with score %d.", state.tick_count + 1, state.score)
        return replace(state, game_over=True, tick_count=state.tick_count + 1)

    # Sand goes back where the tail was, then the worm is stamped on top.
    tail = segments[-1]
    vacated = compute_next_move(tail.location, opposite_direction(path[tail.key])).coordinates
    board = add_drop_item(field, GroundTexture.SAND, vacated)
    for segment in segments:
        board = place_segment_tile(board, segment)

    next_state = replace(
        state,
        field=GameField(tile_grid=board, board_size=field.board_size),
        segments=segments,
        path=path,
        tick_count=state.tick_count + 1,
    )
    if target is not None and target.type == GroundTexture.FOOD:
        return _eat(next_state, params, rng)
    return next_state


def _eat(state: GameState, params: Params, rng) -> GameState:
    segments = add_worm_segment(state.segments, state.path)
    path = extend_path(len(segments), state.path)

    board = state.field.tile_grid
    for segment in segments[-2:]:
        board = place_segment_tile(board, segment)
    field = GameField(tile_grid=board, board_size=state.field.board_size)

    state = replace(
        state,
        field=field,
        segments=segments,
        path=path,
        score=state.score + params.score_per_food,
        food_eaten=state.food_eaten + 1,
        speed_ms=max(params.min_speed_ms, state.speed_ms - params.speed_step_ms),
    )
    logger.info("Food eaten, sandworm length %d, score %d.", len(segments), state.score)

    try:
        drop = find_random_tile_by_type(board, GroundTexture.SAND, rng)
    except NoMatchingTile:
        if any(t.type == GroundTexture.FOOD for row in board for t in row):
            # No room for a new drop, but there is still food to eat.
            return state
        logger.info("No sand or food left, the sandworm fills the board.")
        return replace(state, game_won=True)

    board = add_drop_item(field, GroundTexture.FOOD, drop.data.location)
    return replace(state, field=GameField(tile_grid=board, board_size=field.board_size))
