"""
Constrained password generation entry points.
"""

import logging
from typing import Iterable, List, Optional

from ..charsets import BUILTIN_CLASSES
from ..models import CharacterClass, ClassSettings, GenerationRequest
from ..random_source import RandomSource, SystemRandomSource
from .normalizer import normalize
from .postprocessor import ensure_letter_start, shuffle
from .sampler import sample
from .validator import validate

logger = logging.getLogger(__name__)


class PasswordGenerator:
    """Generate passwords that satisfy per-class minimum and maximum constraints."""

    def __init__(self, request: GenerationRequest, rng: Optional[RandomSource] = None):
        """
        Initialize password generator for a request.

        Args:
            request: Fully parsed generation request
            rng: Random source (defaults to the ``secrets`` module)
        """
        self.request = request
        self.rng = rng or SystemRandomSource()

    def normalized_classes(self) -> List[CharacterClass]:
        """Fresh effective classes for the request."""
        return normalize(self.request)

    def validate(self) -> List[CharacterClass]:
        """
        Normalize and validate without drawing anything.

        Returns:
            The validated classes

        Raises:
            GenerationError: If the request is infeasible
        """
        classes = self.normalized_classes()
        validate(self.request, classes)
        return classes

    def generate(self) -> str:
        """
        Generate a password.

        Returns:
            Generated password string

        Raises:
            GenerationError: If the request is infeasible or sampling runs dry
        """
        classes = self.validate()
        chars = sample(classes, self.request.target_length,
                       self.request.begin_with_letter, self.rng)
        shuffle(chars, self.rng)
        if self.request.begin_with_letter:
            ensure_letter_start(chars)

        logger.debug(f"Generated {len(chars)}-character password "
                     f"from {len(classes)} classes")
        return "".join(chars)

    def get_charset_info(self) -> str:
        """
        Get human-readable description of the effective classes.

        Returns:
            One line per class, or a note that nothing is selected
        """
        classes = self.normalized_classes()
        if not classes:
            return "no character classes selected"
        return "\n".join(charset.describe() for charset in classes)


def generate(request: GenerationRequest, rng: Optional[RandomSource] = None) -> str:
    """
    Generate a password for a request.

    Args:
        request: Fully parsed generation request
        rng: Random source (defaults to the ``secrets`` module)

    Returns:
        Password of exactly ``request.target_length`` characters

    Raises:
        GenerationError: On any validation or sampling failure
    """
    return PasswordGenerator(request, rng).generate()


def generate_password(length: int = 16,
                      use_symbols: bool = True,
                      use_digits: bool = True,
                      use_lowercase: bool = True,
                      use_uppercase: bool = True,
                      minimum: int = 1,
                      allow_duplicates: bool = True,
                      begin_with_letter: bool = False,
                      exclude: Iterable[str] = (),
                      rng: Optional[RandomSource] = None) -> str:
    """
    Convenience function to generate a password.

    Every enabled built-in class gets the same minimum and a maximum of
    ``length``.

    Args:
        length: Password length
        use_symbols: Include symbols
        use_digits: Include digits
        use_lowercase: Include lowercase letters
        use_uppercase: Include uppercase letters
        minimum: Minimum characters from each enabled class
        allow_duplicates: Allow a character to repeat within its class
        begin_with_letter: Force the first character to be a letter
        exclude: Exclusion groups to apply ("similar", "ambiguous")
        rng: Random source

    Returns:
        Generated password string
    """
    enabled = {
        "symbols": use_symbols,
        "digits": use_digits,
        "lowercase": use_lowercase,
        "uppercase": use_uppercase,
    }
    classes = tuple(
        ClassSettings(name, chars, minimum=minimum, maximum=length,
                      allow_duplicates=allow_duplicates, active=enabled[name])
        for name, chars in BUILTIN_CLASSES
    )
    request = GenerationRequest(
        target_length=length,
        classes=classes,
        begin_with_letter=begin_with_letter,
        exclude_groups=frozenset(exclude),
    )
    return generate(request, rng)
