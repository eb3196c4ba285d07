from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from .display import Display
from .throw import LEGAL_THROWS, Outcome, Throw, evaluate


class UnparseableThrow(ValueError):
    """The human's input did not name rock, paper or scissors."""

    def __init__(self, throw: Throw) -> None:
        super().__init__(f"unparseable throw: {throw.name}")
        self.throw = throw


@runtime_checkable
class Agent(Protocol):
    name: str

    def select_throw(self, legal: Sequence[Throw], display: Display) -> Throw: ...


@dataclass(frozen=True, slots=True)
class RoundResult:
    human: Throw
    computer: Throw
    outcome: Outcome


def play_round(human: Agent, computer: Agent, *, display: Display) -> RoundResult:
    """
    Play one round and announce it.

    Output order is fixed: human throw, computer throw, result. An INVALID human throw
    raises UnparseableThrow before anything is announced or drawn.
    """
    h = human.select_throw(LEGAL_THROWS, display)
    if h not in LEGAL_THROWS:
        raise UnparseableThrow(h)
    display.human_throw(h)

    c = computer.select_throw(LEGAL_THROWS, display)
    if c not in LEGAL_THROWS:
        raise ValueError(f"{computer.name} returned an illegal throw: {c!r}")
    display.computer_throw(c)

    outcome = evaluate(h, c)
    display.result(outcome)
    return RoundResult(human=h, computer=c, outcome=outcome)
