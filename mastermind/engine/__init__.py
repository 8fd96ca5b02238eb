from .constraints import CandidateSpace, filter_candidates
from .errors import (
    EmptyCandidateSpace,
    GameStateError,
    InconsistentConstraints,
    InvalidCode,
    InvalidCodeLength,
    InvalidInput,
    MastermindError,
)
from .rules import DEFAULT_RULES, Rules
from .scoring import Code, Feedback, is_win, score, win_feedback
from .validation import parse_code, validate_code

__all__ = [
    "score", "is_win", "win_feedback", "Feedback", "Code",
    "CandidateSpace", "filter_candidates",
    "parse_code", "validate_code",
    "Rules", "DEFAULT_RULES",
    "MastermindError", "InvalidCode", "InvalidCodeLength", "InvalidInput",
    "EmptyCandidateSpace", "InconsistentConstraints", "GameStateError",
]
