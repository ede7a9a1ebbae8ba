"""
Static feasibility checks run before any character is drawn.
"""

import logging
from typing import Any, List

from ..exceptions import (
    InsufficientUniqueCharactersError,
    InvalidBoundsError,
    InvalidLengthError,
    MaxSumTooLowError,
    MinSumTooHighError,
    NoCharactersSelectedError,
    NoLetterAvailableError,
)
from ..models import CharacterClass, GenerationRequest

logger = logging.getLogger(__name__)


def _is_count(value: Any) -> bool:
    """True for non-negative integers (bools and floats are not counts)."""
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def validate_length(target_length: Any) -> int:
    """
    Check the requested password length.

    Raises:
        InvalidLengthError: If the length is missing, not an integer, or below 1
    """
    if not _is_count(target_length) or target_length < 1:
        logger.debug(f"Rejected password length: {target_length!r}")
        raise InvalidLengthError()
    return target_length


def validate(request: GenerationRequest, classes: List[CharacterClass]) -> None:
    """
    Reject requests that cannot possibly be satisfied.

    Checks run in a fixed order and the first failure wins, so the error
    raised is a pure function of the request.

    Args:
        request: The generation request
        classes: Classes produced by the normalizer for this request

    Raises:
        GenerationError: The subclass matching the first failed check
    """
    length = validate_length(request.target_length)

    if not classes:
        logger.debug("Rejected request: no active character classes")
        raise NoCharactersSelectedError()

    for charset in classes:
        if not _is_count(charset.minimum) or not _is_count(charset.maximum):
            logger.debug(f"Rejected bounds for {charset.name}: "
                         f"min={charset.minimum!r} max={charset.maximum!r}")
            raise InvalidBoundsError()

        if charset.minimum > charset.maximum:
            logger.debug(f"Rejected bounds for {charset.name}: min above max")
            raise InvalidBoundsError(
                "At least one minimum is greater than its respective maximum."
            )

    for charset in classes:
        if not charset.allow_duplicates and charset.minimum > len(charset.chars):
            logger.debug(f"Rejected {charset.name}: min {charset.minimum} "
                         f"exceeds {len(charset.chars)} unique characters")
            raise InsufficientUniqueCharactersError()

    if request.begin_with_letter and not any(c.has_letter() for c in classes):
        logger.debug("Rejected request: letter start required but no letters available")
        raise NoLetterAvailableError()

    if sum(c.maximum for c in classes) < length:
        logger.debug("Rejected request: sum of maximums below length")
        raise MaxSumTooLowError()

    if sum(c.minimum for c in classes) > length:
        logger.debug("Rejected request: sum of minimums above length")
        raise MinSumTooHighError()
