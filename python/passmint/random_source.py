"""
Sources of randomness for the generator.

The generator only needs uniform integers in ``[0, n)``, so any object with a
``randbelow`` method can be injected. Tests use ``SeededRandomSource`` for
reproducible output.
"""

import random
import secrets
from typing import Optional, Protocol


class RandomSource(Protocol):
    """Capability providing uniform integers."""

    def randbelow(self, n: int) -> int:
        """Return a uniform integer in ``[0, n)``."""
        ...


class SystemRandomSource:
    """Random source backed by the ``secrets`` module."""

    def randbelow(self, n: int) -> int:
        return secrets.randbelow(n)


class SeededRandomSource:
    """Deterministic random source for tests and reproducible runs."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._random = random.Random(seed)

    def randbelow(self, n: int) -> int:
        return self._random.randrange(n)
