"""Tests for the worm path."""

import pytest

from sandworm.definitions import Coordinates, Direction, WormAnatomy, WormSegment
from sandworm.errors import InvalidArgument
from sandworm.navigation import advance_path, direction_for_segment, extend_path, initialize_path

UP, DOWN, LEFT, RIGHT = Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT


def segment(key):
    return WormSegment(key, WormAnatomy.BODY, Coordinates(0, key))


class TestInitializePath:
    @pytest.mark.parametrize("length", [1, 4, 9])
    def test_uniform_path(self, length):
        path = initialize_path(length, RIGHT)
        assert len(path) == length
        assert all(d == RIGHT for d in path)

    def test_invalid_arguments(self):
        with pytest.raises(InvalidArgument):
            initialize_path(0, RIGHT)
        with pytest.raises(InvalidArgument):
            initialize_path(-3, RIGHT)
        with pytest.raises(InvalidArgument):
            initialize_path(4, None)


class TestDirectionForSegment:
    def test_indexed_by_key(self):
        path = (UP, RIGHT, RIGHT, DOWN)
        assert direction_for_segment(path, segment(0)) == UP
        assert direction_for_segment(path, segment(3)) == DOWN

    def test_repeatable(self):
        path = (LEFT, UP, UP)
        assert direction_for_segment(path, segment(1)) == direction_for_segment(path, segment(1))

    def test_invalid_arguments(self):
        with pytest.raises(InvalidArgument):
            direction_for_segment((), segment(0))
        with pytest.raises(InvalidArgument):
            direction_for_segment(None, segment(0))
        with pytest.raises(InvalidArgument):
            direction_for_segment((UP,), None)
        with pytest.raises(InvalidArgument):
            direction_for_segment((UP,), WormSegment(None, WormAnatomy.HEAD, Coordinates(0, 0)))


class TestAdvancePath:
    def test_follow_the_leader(self):
        path = (UP, RIGHT, RIGHT, DOWN)
        assert advance_path(LEFT, path) == (LEFT, UP, RIGHT, RIGHT)

    def test_length_preserved(self):
        for length in (1, 2, 5):
            path = initialize_path(length, DOWN)
            assert len(advance_path(UP, path)) == length

    def test_input_not_mutated(self):
        path = [UP, RIGHT, RIGHT]
        advance_path(LEFT, path)
        assert path == [UP, RIGHT, RIGHT]

    def test_turn_propagates_down_the_body(self):
        path = initialize_path(3, RIGHT)
        path = advance_path(UP, path)
        path = advance_path(UP, path)
        path = advance_path(UP, path)
        assert path == (UP, UP, UP)

    def test_invalid_arguments(self):
        with pytest.raises(InvalidArgument):
            advance_path(None, (UP,))
        with pytest.raises(InvalidArgument):
            advance_path(UP, ())


class TestExtendPath:
    def test_repeats_tail_direction(self):
        assert extend_path(6, (UP, RIGHT, DOWN)) == (UP, RIGHT, DOWN, DOWN, DOWN, DOWN)

    def test_same_length(self):
        assert extend_path(3, (UP, RIGHT, DOWN)) == (UP, RIGHT, DOWN)

    def test_invalid_arguments(self):
        with pytest.raises(InvalidArgument):
            extend_path(0, (UP,))
        with pytest.raises(InvalidArgument):
            extend_path(4, ())
