from __future__ import annotations

from typing import List

from mastermind.engine import DEFAULT_RULES, Rules
from .base import REGISTRY, BasePlayer, CodeBreaker, CodeMaker, Operator, Role, register
from .computer import ComputerBreaker, ComputerMaker
from .human import HumanBreaker, HumanMaker


def _coerce(enum_cls, value, normalize):
    if isinstance(value, enum_cls):
        return value
    return enum_cls(normalize(str(value).strip()))


def create_player(role: Role | str, operator: Operator | str,
                  rules: Rules = DEFAULT_RULES, **kwargs) -> BasePlayer:
    """
    Factory: instantiate the registered player for (role, operator).

    Extra keyword arguments go to the constructor (`seed`, and `prompt` for
    human players).
    """
    try:
        key = (_coerce(Role, role, str.upper), _coerce(Operator, operator, str.lower))
        cls = REGISTRY[key]
    except (KeyError, ValueError) as e:
        raise ValueError(
            f"Unknown player {role}/{operator}. Available: {get_player_ids()}") from e
    return cls(rules, **kwargs)


def get_player_ids() -> List[str]:
    """
    Return all registered players as 'ROLE/operator' (sorted for stable CLI help).
    """
    return sorted(f"{r.value}/{o.value}" for r, o in REGISTRY)


__all__ = [
    "Role", "Operator", "BasePlayer", "CodeMaker", "CodeBreaker",
    "ComputerMaker", "ComputerBreaker", "HumanMaker", "HumanBreaker",
    "REGISTRY", "register", "create_player", "get_player_ids",
]
