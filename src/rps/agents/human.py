from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..display import Display
from ..throw import Throw


@dataclass(slots=True)
class HumanAgent:
    """
    The player at the keyboard.

    With a preset (the throw given on the command line) no input is read. Otherwise one
    line is read from stdin; end of input counts as an empty line. The result may be
    INVALID; rejecting it is the engine's job.
    """

    preset: Throw | None = None
    name: str = "human"

    def select_throw(self, legal: Sequence[Throw], display: Display) -> Throw:
        if self.preset is not None:
            return self.preset

        display.prompt_throw()
        try:
            raw = input()
        except EOFError:
            raw = ""
        return Throw.parse(raw)
