"""
Exceptions raised by the sandworm engine.

Every failure is fatal to the call that raised it. The tick reducer is the
only place that catches them, turning the failure into a game-over state.
"""


class SandwormError(Exception):
    """Base class for every engine failure."""


class InvalidArgument(SandwormError, ValueError):
    """A required input was missing or malformed."""


class InvalidDimension(InvalidArgument):
    pass


class InvalidTileSpec(InvalidArgument):
    pass


class InvalidQuery(InvalidArgument):
    pass


class MissingDimensions(InvalidArgument):
    pass


class InsufficientCandidates(InvalidArgument):
    """Fewer than two moves were handed to a binary choice."""


class NoMatchingTile(SandwormError, LookupError):
    pass


class AllMovesInvalid(SandwormError):
    pass


class MoveDeterminationFailed(SandwormError, RuntimeError):
    """Head move resolution failed; the original cause is chained."""
