"""
Shared fixtures for Passmint tests.
"""

from typing import Tuple

import pytest

from passmint.charsets import BUILTIN_CLASSES
from passmint.models import ClassSettings, GenerationRequest


class FixedRandom:
    """Random source that always picks the same index (clamped to the range)."""

    def __init__(self, index: int = 0):
        self.index = index
        self.calls = []

    def randbelow(self, n: int) -> int:
        self.calls.append(n)
        return min(self.index, n - 1)


@pytest.fixture
def fixed_random():
    """Random source that always returns 0."""
    return FixedRandom(0)


@pytest.fixture
def build_request():
    """
    Factory for requests over the built-in classes.

    Classes are given as name=(min, max, allow_duplicates); any built-in class
    not named is inactive.
    """
    def _build(length, begin_with_letter=False, other_included="", other=(0, 0, True),
               other_excluded="", exclude_groups=(), **bounds: Tuple[int, int, bool]):
        classes = []
        for name, chars in BUILTIN_CLASSES:
            if name in bounds:
                minimum, maximum, duplicates = bounds[name]
                classes.append(ClassSettings(name, chars, minimum, maximum, duplicates, True))
            else:
                classes.append(ClassSettings(name, chars, 1, 16, True, False))

        return GenerationRequest(
            target_length=length,
            classes=tuple(classes),
            begin_with_letter=begin_with_letter,
            other_included=other_included,
            other=ClassSettings("other", other_included, *other),
            other_excluded=other_excluded,
            exclude_groups=frozenset(exclude_groups),
        )

    return _build
