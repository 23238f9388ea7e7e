from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional


@dataclass
class RNG:
    """
    Random-source handle threaded through room placement and tunnel carving.

    Wraps a private random.Random so generation never touches the module-level
    RNG. Pass a seed for reproducible tests; leave it None for a fresh layout
    on every run.
    """

    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._rng.randint(a, b)

    def coin(self) -> bool:
        """Fair coin flip."""
        return self._rng.random() < 0.5

    def state(self):
        """Return the internal PRNG state for debugging."""
        return self._rng.getstate()

    def set_state(self, state) -> None:
        """Restore the internal PRNG state."""
        self._rng.setstate(state)
