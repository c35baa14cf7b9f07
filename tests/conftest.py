from __future__ import annotations

from itertools import cycle
from typing import List, Sequence

import pytest


class ScriptedProvider:
    """Replays a fixed cycle of numbers and records every log message."""

    def __init__(self, values: Sequence[int]) -> None:
        self._values = cycle(values)
        self.calls: List[int] = []
        self.messages: List[str] = []

    def random_in_range(self, size: int) -> int:
        self.calls.append(size)
        return next(self._values)

    def debug_log(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture
def scripted():
    return ScriptedProvider
