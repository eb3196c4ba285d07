from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass, field

from ..display import Display
from ..throw import Throw


@dataclass(slots=True)
class RandomAgent:
    name: str = "computer"
    rng: random.Random = field(default_factory=random.Random)

    def select_throw(self, legal: Sequence[Throw], display: Display) -> Throw:
        return self.rng.choice(legal)
