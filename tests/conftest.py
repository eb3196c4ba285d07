from __future__ import annotations

import io

import pytest
from rich.console import Console

from rps.display import Display


def _plain_console() -> Console:
    return Console(file=io.StringIO(), force_terminal=False, color_system=None, highlight=False, width=200)


@pytest.fixture
def display() -> Display:
    return Display(out=_plain_console(), err=_plain_console())
