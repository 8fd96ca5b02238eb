"""
Code validation and parsing of raw human input.

This module answers two questions:
  - "Is this code acceptable under these rules?"   (validate_code)
  - "Which code did the player type?"              (parse_code)

A code is valid iff it has exactly N pegs and every peg is a palette color.
Typed input is a line of color names separated by whitespace or commas,
case-insensitive. Unambiguous prefixes are accepted ("mag" -> "magenta"),
but an exact name always wins over a prefix match.
"""

from __future__ import annotations

import re
from typing import Iterable, List

from .errors import InvalidInput
from .rules import DEFAULT_RULES, Rules
from .scoring import Code

_SEPARATORS = re.compile(r"[\s,]+")


def validate_code(code: Iterable[str], rules: Rules = DEFAULT_RULES) -> bool:
    """Return True if `code` has the right length and only palette colors."""
    if isinstance(code, str):
        return False
    pegs = list(code)
    if len(pegs) != rules.code_length:
        return False
    return all(isinstance(c, str) and c in rules.palette for c in pegs)


def _resolve_color(token: str, rules: Rules) -> str:
    if token in rules.palette:
        return token

    matches = [c for c in rules.palette if c.startswith(token)]
    if len(matches) == 1:
        return matches[0]

    allowed = ", ".join(rules.palette)
    if matches:
        raise InvalidInput(f"Ambiguous color '{token}' (could be {', '.join(matches)}).")
    raise InvalidInput(f"Invalid color '{token}'. Allowed: {allowed}.")


def parse_code(text: str, rules: Rules = DEFAULT_RULES) -> Code:
    """
    Turn one line of input into a Code.

    Raises InvalidInput with a human-readable reason on any problem.
    """
    tokens: List[str] = [t for t in _SEPARATORS.split(text.strip().lower()) if t]

    if len(tokens) != rules.code_length:
        raise InvalidInput(
            f"Code must have {rules.code_length} colors, but got {len(tokens)}."
        )

    return tuple(_resolve_color(t, rules) for t in tokens)
