from __future__ import annotations

from enum import Enum


class Throw(Enum):
    # Values are positions in the cyclic order; a throw beats the one just below it (mod 3).
    ROCK = 0
    PAPER = 1
    SCISSORS = 2
    INVALID = -1

    @classmethod
    def parse(cls, text: str) -> Throw:
        """
        Map free-form text to a throw. Case-insensitive, trailing whitespace ignored.

        Never raises: anything unrecognised (including "") is INVALID and the caller decides
        what to do about it.
        """
        return _BY_NAME.get(text.lower().rstrip(), cls.INVALID)

    @property
    def is_legal(self) -> bool:
        return self is not Throw.INVALID

    @property
    def label(self) -> str:
        return _THROW_LABELS[self]

    def beats(self, other: Throw) -> bool:
        if not (self.is_legal and other.is_legal):
            raise ValueError(f"cannot compare {self.name} with {other.name}")
        return (self.value - other.value) % 3 == 1


class Outcome(Enum):
    WIN = "win"
    LOSE = "lose"
    TIE = "tie"

    @property
    def label(self) -> str:
        return _OUTCOME_LABELS[self]


LEGAL_THROWS: tuple[Throw, ...] = (Throw.ROCK, Throw.PAPER, Throw.SCISSORS)

_BY_NAME = {t.name.lower(): t for t in LEGAL_THROWS}

_THROW_LABELS = {
    Throw.ROCK: "Rock 🪨",
    Throw.PAPER: "Paper 🧻",
    Throw.SCISSORS: "Scissors ✂️",
    Throw.INVALID: "Invalid Input 🐛",
}

_OUTCOME_LABELS = {
    Outcome.WIN: "You win, congrats! 🎉",
    Outcome.LOSE: "Sorry, you lose 😿",
    Outcome.TIE: "It's a tie! 👔",
}


def evaluate(reference: Throw, opponent: Throw) -> Outcome:
    """Result of `reference` against `opponent`, from the reference's point of view."""
    if reference is opponent:
        if not reference.is_legal:
            raise ValueError("cannot evaluate an INVALID throw")
        return Outcome.TIE
    return Outcome.WIN if reference.beats(opponent) else Outcome.LOSE
