from __future__ import annotations

import io
import random
from collections import Counter

import pytest

from rps.agents import HumanAgent, RandomAgent
from rps.display import Display
from rps.throw import LEGAL_THROWS, Throw


def test_random_agent_only_draws_legal_throws_roughly_uniformly(display: Display) -> None:
    agent = RandomAgent(rng=random.Random(1234))
    counts = Counter(agent.select_throw(LEGAL_THROWS, display) for _ in range(3000))

    assert set(counts) == set(LEGAL_THROWS)
    for t in LEGAL_THROWS:
        assert 850 <= counts[t] <= 1150


def test_random_agent_default_rng(display: Display) -> None:
    assert RandomAgent().select_throw(LEGAL_THROWS, display) in LEGAL_THROWS


def test_human_preset_reads_nothing(display: Display, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    agent = HumanAgent(preset=Throw.PAPER)

    assert agent.select_throw(LEGAL_THROWS, display) is Throw.PAPER
    assert display.out.file.getvalue() == ""


def test_human_reads_one_line(display: Display, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("Scissors\nrock\n"))

    assert HumanAgent().select_throw(LEGAL_THROWS, display) is Throw.SCISSORS
    assert "What do you throw?" in display.out.file.getvalue()


def test_human_end_of_input_is_invalid(display: Display, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(""))

    assert HumanAgent().select_throw(LEGAL_THROWS, display) is Throw.INVALID
