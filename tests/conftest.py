import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))


class ScriptedRNG:
    """Random source that replays fixed answers, checking each requested range."""

    def __init__(self, ints=(), coins=()):
        self.ints = list(ints)
        self.coins = list(coins)

    def randint(self, a: int, b: int) -> int:
        value = self.ints.pop(0)
        assert a <= value <= b, f"scripted value {value} outside [{a}, {b}]"
        return value

    def coin(self) -> bool:
        return self.coins.pop(0)


@pytest.fixture
def scripted_rng():
    return ScriptedRNG
