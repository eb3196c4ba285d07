from __future__ import annotations

__all__ = [
    "LEGAL_THROWS",
    "Outcome",
    "RoundResult",
    "Throw",
    "UnparseableThrow",
    "evaluate",
    "play_round",
]

from .engine import RoundResult, UnparseableThrow, play_round
from .throw import LEGAL_THROWS, Outcome, Throw, evaluate
