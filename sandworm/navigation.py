"""
Worm path tracking.

The path holds one direction per segment, head first: path[i] is the way
segment i moves this tick. Each tick the head's new direction is pushed on
the front and the last entry falls off, so every segment follows the one
ahead of it. Paths are tuples; every function returns a new one.
"""

from __future__ import annotations

from sandworm.definitions import Direction, WormPath, WormSegment
from sandworm.errors import InvalidArgument


def initialize_path(length: int, direction: Direction) -> WormPath:
    if not length or length <= 0 or not isinstance(direction, Direction):
        raise InvalidArgument("Cannot set up worm path. Invalid worm length or direction.")
    return (direction,) * length


def direction_for_segment(path: WormPath, segment: WormSegment) -> Direction:
    if not path or segment is None or segment.key is None:
        raise InvalidArgument("Cannot get direction from worm path. Invalid worm path or segment.")
    return path[segment.key]


def advance_path(direction: Direction, path: WormPath) -> WormPath:
    """New head direction in front, tail direction dropped; length unchanged."""
    if not isinstance(direction, Direction) or not path:
        raise InvalidArgument("Cannot add direction to worm path. Invalid direction or worm path.")
    return (direction,) + tuple(path[:-1])


def extend_path(length: int, path: WormPath) -> WormPath:
    """Stretch the path to *length*, repeating the tail direction."""
    if not length or length <= 0 or not path:
        raise InvalidArgument("Cannot extend worm path. Invalid worm length or worm path.")
    path = tuple(path)
    if length <= len(path):
        return path[:length]
    return path + (path[-1],) * (length - len(path))
