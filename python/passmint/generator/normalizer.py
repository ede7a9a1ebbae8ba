"""
Turn a raw request into the effective character classes used for sampling.
"""

import logging
from typing import List

from ..charsets import dedupe
from ..models import CharacterClass, ClassSettings, GenerationRequest

logger = logging.getLogger(__name__)


def merge_exclusions(request: GenerationRequest) -> str:
    """Return every character to strip from the built-in classes."""
    return request.excluded_chars


def _working_class(settings: ClassSettings, chars: List[str]) -> CharacterClass:
    return CharacterClass(
        name=settings.name,
        chars=chars,
        minimum=settings.minimum,
        maximum=settings.maximum,
        allow_duplicates=settings.allow_duplicates,
    )


def normalize(request: GenerationRequest) -> List[CharacterClass]:
    """
    Build the effective class list for a request.

    Built-in classes lose every excluded character. The "other" class is
    taken verbatim (deduplicated) since its text is a source of the
    exclusions, not a target of them.

    Args:
        request: The generation request

    Returns:
        Active classes in declaration order, "other" last
    """
    excluded = set(merge_exclusions(request))
    classes: List[CharacterClass] = []

    for settings in request.classes:
        if not settings.participates:
            logger.debug(f"Skipping inactive class: {settings.name}")
            continue
        chars = [c for c in dedupe(settings.chars) if c not in excluded]
        classes.append(_working_class(settings, chars))

    if request.other_included and request.other.participates:
        classes.append(_working_class(request.other, dedupe(request.other_included)))

    logger.debug(
        f"Normalized {len(classes)} classes, excluding {len(excluded)} characters"
    )
    return classes
