"""
Constrained sampling loop.

Characters are drawn one at a time from the concatenation of every active
class. Classes retire when they hit their maximum, and once the remaining
slots are only just enough to cover the outstanding minimums, every class
that has already met its minimum retires too so the rest of the draws go
to the classes that are still short.
"""

import logging
from typing import List

from ..exceptions import UnsatisfiableError
from ..models import CharacterClass, find_owner
from ..random_source import RandomSource

logger = logging.getLogger(__name__)


class SamplingState:
    """Working set for a single generation call."""

    def __init__(self, classes: List[CharacterClass], target_length: int):
        self.active: List[CharacterClass] = list(classes)
        self.output: List[str] = []
        self.target_length = target_length

    @property
    def remaining(self) -> int:
        return self.target_length - len(self.output)

    @property
    def done(self) -> bool:
        return len(self.output) >= self.target_length

    def chars_still_required(self) -> int:
        return sum(charset.shortfall for charset in self.active)

    def retire(self, charset: CharacterClass) -> None:
        logger.debug(f"Retiring class {charset.name} at count {charset.count}")
        self.active = [c for c in self.active if c is not charset]

    def retire_satisfied(self) -> None:
        """Drop every class that has met its minimum."""
        satisfied = [c for c in self.active if c.met_minimum]
        for charset in satisfied:
            self.retire(charset)

    def pool(self, letters_only: bool = False) -> List[str]:
        pool: List[str] = []
        for charset in self.active:
            pool.extend(charset.letters() if letters_only else charset.chars)
        return pool

    def append(self, char: str) -> None:
        self.output.append(char)
        owner = find_owner(self.active, char)
        if owner is None:
            # pool is built from active classes only
            raise RuntimeError(f"Drawn character {char!r} has no owning class")

        owner.record_draw(char)
        if owner.exhausted:
            self.retire(owner)


def sample(classes: List[CharacterClass],
           target_length: int,
           begin_with_letter: bool,
           rng: RandomSource) -> List[str]:
    """
    Draw exactly ``target_length`` characters honoring every class's bounds.

    Args:
        classes: Validated classes from the normalizer (mutated in place)
        target_length: Number of characters to draw
        begin_with_letter: Restrict the first draw to letters
        rng: Source of uniform integers

    Returns:
        Drawn characters in draw order

    Raises:
        UnsatisfiableError: If the eligible pool empties before the target length
    """
    state = SamplingState(classes, target_length)
    first_draw = True

    while not state.done:
        if state.remaining <= state.chars_still_required():
            state.retire_satisfied()

        pool = state.pool(letters_only=first_draw and begin_with_letter)
        if not pool:
            logger.debug(f"Eligible pool empty with {state.remaining} characters left")
            raise UnsatisfiableError()

        state.append(pool[rng.randbelow(len(pool))])
        first_draw = False

    return state.output
