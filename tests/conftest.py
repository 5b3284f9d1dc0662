import pytest

from game.engine import GameEngine


class ScriptedRng:
    """Stands in for random.Random: hands out prepared secrets in order."""

    def __init__(self, *codes):
        self.codes = [list(c) for c in codes]
        self.calls = []

    def choices(self, population, k):
        self.calls.append((list(population), k))
        return self.codes.pop(0)


@pytest.fixture
def make_engine():
    def _make(secret, max_attempts=10, next_secrets=()):
        rng = ScriptedRng(secret, *next_secrets)
        return GameEngine(len(secret), max_attempts, rng=rng)

    return _make
