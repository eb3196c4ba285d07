from __future__ import annotations

import argparse

from .agents.human import HumanAgent
from .agents.random_agent import RandomAgent
from .display import Display
from .engine import Agent, UnparseableThrow, play_round
from .throw import Throw

FATAL_MESSAGE = "I'm not playing with you now."


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="rps", description="Rock, Paper, Scissors Game")
    p.add_argument(
        "throw",
        nargs="?",
        type=Throw.parse,
        help="rock|paper|scissors; play a single round. Omit to play interactively",
    )
    return p


def _wants_another_round() -> bool:
    try:
        answer = input()
    except EOFError:
        return False
    return answer.lower().rstrip() == ""


def run_single(throw: Throw, opponent: Agent, display: Display) -> int:
    display.clear()
    display.banner()
    play_round(HumanAgent(preset=throw), opponent, display=display)
    return 0


def run_interactive(opponent: Agent, display: Display) -> int:
    human = HumanAgent()
    while True:
        display.clear()
        display.banner()
        play_round(human, opponent, display=display)
        display.prompt_continue()
        if not _wants_another_round():
            return 0


def main(argv: list[str] | None = None, *, opponent: Agent | None = None, display: Display | None = None) -> int:
    args = build_parser().parse_args(argv)
    opponent = opponent if opponent is not None else RandomAgent()
    display = display if display is not None else Display()

    try:
        if args.throw is None:
            return run_interactive(opponent, display)
        return run_single(args.throw, opponent, display)
    except UnparseableThrow:
        display.fatal(FATAL_MESSAGE)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
