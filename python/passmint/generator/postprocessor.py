"""
Final ordering of the drawn characters.
"""

from typing import List

from ..charsets import is_letter
from ..random_source import RandomSource


def shuffle(chars: List[str], rng: RandomSource) -> List[str]:
    """Fisher-Yates shuffle in place, scanning from the last index down to 1."""
    for i in range(len(chars) - 1, 0, -1):
        j = rng.randbelow(i + 1)
        chars[i], chars[j] = chars[j], chars[i]
    return chars


def ensure_letter_start(chars: List[str]) -> List[str]:
    """Swap the first letter found into position 0, if position 0 is not already a letter."""
    if not chars or is_letter(chars[0]):
        return chars

    for i, char in enumerate(chars):
        if is_letter(char):
            chars[0], chars[i] = chars[i], chars[0]
            break

    return chars
