"""
Exception hierarchy for the Mastermind engine and game loop.

Everything raised on purpose derives from MastermindError, so callers (the
CLI in particular) can catch one type. Each concrete error also derives from
the closest builtin so generic `except ValueError` handlers keep working.
"""


class MastermindError(Exception):
    """Base class for all game errors."""


class InvalidCode(MastermindError, ValueError):
    """A code handed over by a player object does not fit the rules."""


class InvalidCodeLength(InvalidCode):
    """Guess and secret (or a code and the rules) disagree on peg count."""


class InvalidInput(MastermindError, ValueError):
    """Raw human input could not be turned into a valid code."""


class EmptyCandidateSpace(MastermindError, RuntimeError):
    """The breaker has no consistent candidate left to guess."""


class InconsistentConstraints(EmptyCandidateSpace):
    """A (guess, feedback) pair eliminated every remaining candidate."""


class GameStateError(MastermindError, RuntimeError):
    """A session operation was called in the wrong state."""
