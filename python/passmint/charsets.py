"""
Character sets used by the password generator.
"""

import string
from typing import Dict, List, Tuple

# Built-in classes, in declaration order
SYMBOLS = "!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~"
DIGITS = "1234567890"
LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase

BUILTIN_CLASSES: List[Tuple[str, str]] = [
    ("symbols", SYMBOLS),
    ("digits", DIGITS),
    ("lowercase", LOWERCASE),
    ("uppercase", UPPERCASE),
]

# Groups the user can strip from every built-in class
SIMILAR_CHARS = "iIl1lL|o0O"
AMBIGUOUS_CHARS = "{}[]()/\\'\"`~,;:.<>"

EXCLUSION_GROUPS: Dict[str, str] = {
    "similar": SIMILAR_CHARS,
    "ambiguous": AMBIGUOUS_CHARS,
}

LETTERS = frozenset(string.ascii_letters)


def is_letter(char: str) -> bool:
    """Return True for ASCII letters only."""
    return char in LETTERS


def dedupe(chars: str) -> List[str]:
    """Return the characters of a string without repeats, keeping first-seen order."""
    return list(dict.fromkeys(chars))
