from __future__ import annotations

import logging
import random
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


class SnakeProvider(Protocol):
    """Capabilities the game needs from its host."""

    def random_in_range(self, size: int) -> int:
        """Return a random number in ``[0, size)``."""
        ...

    def debug_log(self, message: str) -> None:
        ...


class RandomProvider:
    def __init__(self, seed: Optional[int] = None, log: Optional[logging.Logger] = None) -> None:
        self.random = random.Random(seed)
        self.log = log or logger

    def random_in_range(self, size: int) -> int:
        return self.random.randrange(size)

    def debug_log(self, message: str) -> None:
        self.log.debug(message)
