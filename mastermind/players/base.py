from __future__ import annotations

import random
from enum import Enum
from typing import Dict, Tuple, Type

from mastermind.engine import DEFAULT_RULES, Code, Feedback, Rules


class Role(str, Enum):
    MAKER = "MAKER"
    BREAKER = "BREAKER"


class Operator(str, Enum):
    HUMAN = "human"
    COMPUTER = "computer"


# ---- Global player registry, keyed by (role, operator) ----
REGISTRY: Dict[Tuple[Role, Operator], Type["BasePlayer"]] = {}


def register(cls: Type["BasePlayer"]) -> Type["BasePlayer"]:
    """
    Decorator: @register on a player class adds it to REGISTRY under
    (cls.role, cls.operator).
    """
    role = getattr(cls, "role", None)
    operator = getattr(cls, "operator", None)
    if role is None or operator is None:
        raise ValueError(f"{cls.__name__} must define both `role` and `operator`")
    key = (Role(role), Operator(operator))
    if key in REGISTRY:
        raise ValueError(f"Duplicate player for {key[0].value}/{key[1].value}")
    REGISTRY[key] = cls
    return cls


# ---- Interfaces that players implement ----
class BasePlayer:
    role: Role | None = None
    operator: Operator | None = None
    name = "Base"

    def __init__(self, rules: Rules = DEFAULT_RULES, *, seed: int | None = None):
        self.rules = rules
        self.rng = random.Random(seed)


class CodeMaker(BasePlayer):
    role = Role.MAKER

    def generate_code(self) -> Code:
        raise NotImplementedError("Override in subclass")


class CodeBreaker(BasePlayer):
    role = Role.BREAKER

    def guess(self) -> Code:
        raise NotImplementedError("Override in subclass")

    def log_evaluation(self, feedback: Feedback, guess: Code) -> None:
        """Receive the feedback the session computed for `guess` against the secret."""
        raise NotImplementedError("Override in subclass")
