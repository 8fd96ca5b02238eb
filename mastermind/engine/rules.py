"""
Game configuration.

A Rules value is passed explicitly to every component that needs to know the
palette, the peg count or the turn budget. Nothing reads a module-level
palette at runtime; DEFAULT_RULES is only the starting point.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Iterable, Tuple

# Classic board: six colors, four pegs, twelve guesses.
CLASSIC_PALETTE: Tuple[str, ...] = ("red", "yellow", "green", "blue", "magenta", "black")
CLASSIC_CODE_LENGTH = 4
CLASSIC_MAX_TURNS = 12

# Typed codes are split on these, so no color name may contain one.
_SEPARATORS = re.compile(r"[\s,]")


@dataclass(frozen=True)
class Rules:
    palette: Tuple[str, ...] = CLASSIC_PALETTE
    code_length: int = CLASSIC_CODE_LENGTH
    max_turns: int = CLASSIC_MAX_TURNS

    def __post_init__(self) -> None:
        # Normalize palette to a lowercase tuple so Rules stays hashable
        palette = tuple(c.strip().lower() for c in self.palette)
        object.__setattr__(self, "palette", palette)

        if not palette:
            raise ValueError("palette must contain at least one color")
        if any(not c for c in palette):
            raise ValueError("palette colors must be non-empty names")
        bad = [c for c in palette if _SEPARATORS.search(c)]
        if bad:
            raise ValueError(f"palette colors cannot contain spaces or commas: {bad}")
        if len(set(palette)) != len(palette):
            raise ValueError(f"palette contains duplicate colors: {list(palette)}")
        if self.code_length < 1:
            raise ValueError(f"code_length must be >= 1; got {self.code_length}")
        if self.max_turns < 1:
            raise ValueError(f"max_turns must be >= 1; got {self.max_turns}")

    @property
    def num_colors(self) -> int:
        return len(self.palette)

    @property
    def space_size(self) -> int:
        """Number of distinct codes (P ** N)."""
        return self.num_colors ** self.code_length

    def with_overrides(
            self,
            *,
            palette: Iterable[str] | None = None,
            code_length: int | None = None,
            max_turns: int | None = None,
    ) -> "Rules":
        """Return a copy with the given fields replaced (None keeps the current value)."""
        changes = {}
        if palette is not None:
            changes["palette"] = tuple(palette)
        if code_length is not None:
            changes["code_length"] = int(code_length)
        if max_turns is not None:
            changes["max_turns"] = int(max_turns)
        return replace(self, **changes)


DEFAULT_RULES = Rules()
