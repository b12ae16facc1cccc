import pytest

from sandworm.definitions import Coordinates, Dimension, GameField, WormAnatomy, WormSegment
from sandworm.grid import build_board, create_game_field


class FixedRandom:
    """Stands in for numpy's Generator where a test needs a fixed outcome."""

    def __init__(self, value=0.0, index=0):
        self.value = value
        self.index = index

    def random(self):
        return self.value

    def integers(self, high):
        return min(self.index, high - 1)


def straight_worm(head_row, head_col, length=4):
    """A worm lying left of its head, facing right."""
    segments = []
    for key in range(length):
        if key == 0:
            part = WormAnatomy.HEAD
        elif key == length - 1:
            part = WormAnatomy.TAIL
        else:
            part = WormAnatomy.BODY
        segments.append(WormSegment(key, part, Coordinates(head_row, head_col - key)))
    return tuple(segments)


@pytest.fixture
def fixed_rng():
    return FixedRandom


@pytest.fixture
def make_worm():
    return straight_worm


@pytest.fixture
def desktop_size():
    return Dimension(rows=15, columns=30)


@pytest.fixture
def sand_field(desktop_size):
    return GameField(tile_grid=build_board(desktop_size), board_size=desktop_size)


@pytest.fixture
def worm_field(desktop_size):
    segments = straight_worm(7, 10)
    return create_game_field(desktop_size, segments, [Coordinates(3, 3)]), segments
