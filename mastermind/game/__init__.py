from .harness import draw_secrets, pretty_summary, run_batch, run_case, summarize
from .io import write_csv, write_manifest
from .session import GameResult, GameSession, GameState, TurnRecord

__all__ = [
    "GameSession", "GameState", "GameResult", "TurnRecord",
    "run_case", "run_batch", "draw_secrets", "summarize", "pretty_summary",
    "write_csv", "write_manifest",
]
