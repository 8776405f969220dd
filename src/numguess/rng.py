from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from .state import GuessRange

logger = logging.getLogger(__name__)


@dataclass
class RandomSource:
    """
    A thin wrapper around random.Random to:
    - centralize target generation
    - support optional deterministic seeding for tests
    """

    seed: int | None = None

    def __post_init__(self) -> None:
        if self.seed is not None:
            self._rng = random.Random(self.seed)
            logger.debug("Initialized RandomSource with deterministic seed=%s", self.seed)
        else:
            self._rng = random.Random()
            logger.debug("Initialized RandomSource with non-deterministic seed")

    def randint(self, a: int, b: int) -> int:
        """Return a uniformly distributed integer N with a <= N <= b."""
        return self._rng.randint(a, b)

    def draw(self, guess_range: GuessRange) -> int:
        value = self.randint(guess_range.low, guess_range.high)
        logger.debug("Drew target from %s", guess_range)
        return value
