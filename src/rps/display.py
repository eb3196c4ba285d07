"""
Console output for the game.

Everything the player sees goes through a `Display`, which wraps one rich Console for
stdout and one for stderr. Colors are cosmetic; rich drops them when the stream is not a
terminal.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from rich.console import Console
from rich.text import Text

from .throw import Outcome, Throw

_LEAD = "bold purple"


def _stdout_console() -> Console:
    return Console(highlight=False)


def _stderr_console() -> Console:
    return Console(stderr=True, highlight=False)


@dataclass(slots=True)
class Display:
    out: Console = field(default_factory=_stdout_console)
    err: Console = field(default_factory=_stderr_console)

    def clear(self) -> None:
        # Emits the clear/home sequence only when stdout is a terminal.
        self.out.clear()

    def banner(self) -> None:
        text = Text("Let's ")
        for letter, color in zip("play", ("red", "green", "yellow", "blue")):
            text.append(letter, style=f"bold {color}")
        text.append(" 🪨🧻✂️!")
        self.out.print(text)

    def prompt_throw(self) -> None:
        self.out.print(Text("What do you throw?", style=_LEAD))

    def prompt_continue(self) -> None:
        self.out.print(Text("Press ENTER to play again, or anything else to quit", style="bold green"))

    def human_throw(self, throw: Throw) -> None:
        self._announce("You threw...", throw.label)

    def computer_throw(self, throw: Throw) -> None:
        self._announce("Computer throws", throw.label)

    def result(self, outcome: Outcome) -> None:
        self._announce("Result:", outcome.label)

    def fatal(self, message: str) -> None:
        self.err.print(Text(message, style="bold red"))

    def _announce(self, lead: str, body: str) -> None:
        self.out.print(Text.assemble((lead, _LEAD), f" {body}"))
