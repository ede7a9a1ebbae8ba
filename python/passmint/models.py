"""
Request and working-state types for password generation.
"""

from dataclasses import dataclass, field
from typing import Any, FrozenSet, List, Optional, Tuple

from .charsets import EXCLUSION_GROUPS, dedupe, is_letter


@dataclass(frozen=True)
class ClassSettings:
    """
    Raw declaration of one character class, as collected from the user.

    Bounds are kept as given (possibly None or garbage) so that the
    validator can report them instead of failing at construction.
    """

    name: str
    chars: str
    minimum: Any = 0
    maximum: Any = 0
    allow_duplicates: bool = True
    active: bool = True

    @property
    def participates(self) -> bool:
        """True when the class is switched on and may contribute at least one character."""
        if not self.active:
            return False
        try:
            return self.maximum > 0
        except TypeError:
            return False


@dataclass(frozen=True)
class GenerationRequest:
    """Immutable, fully parsed input to the generator."""

    target_length: Any
    classes: Tuple[ClassSettings, ...] = ()
    begin_with_letter: bool = False
    other_included: str = ""
    other: ClassSettings = field(
        default_factory=lambda: ClassSettings("other", "", minimum=0, maximum=0)
    )
    other_excluded: str = ""
    exclude_groups: FrozenSet[str] = frozenset()

    @property
    def excluded_chars(self) -> str:
        """
        Characters removed from every built-in class.

        Union of the explicit exclusion text, the other-included text (which
        gets its own class) and every checked exclusion group.
        """
        merged = self.other_excluded + self.other_included
        for group, chars in EXCLUSION_GROUPS.items():
            if group in self.exclude_groups:
                merged += chars
        return "".join(dedupe(merged))


@dataclass
class CharacterClass:
    """Mutable working copy of a class during one generation call."""

    name: str
    chars: List[str]
    minimum: Any
    maximum: Any
    allow_duplicates: bool = True
    count: int = 0

    @property
    def shortfall(self) -> int:
        """Characters still needed to reach the minimum."""
        return max(0, self.minimum - self.count)

    @property
    def met_minimum(self) -> bool:
        return self.count >= self.minimum

    @property
    def exhausted(self) -> bool:
        return self.count >= self.maximum

    def letters(self) -> List[str]:
        return [c for c in self.chars if is_letter(c)]

    def has_letter(self) -> bool:
        return any(is_letter(c) for c in self.chars)

    def record_draw(self, char: str) -> None:
        """Count a drawn character and consume it when duplicates are disallowed."""
        self.count += 1
        if not self.allow_duplicates:
            self.chars.remove(char)

    def describe(self) -> str:
        duplicates = "duplicates allowed" if self.allow_duplicates else "no duplicates"
        return (
            f"{self.name}: {len(self.chars)} chars, "
            f"min {self.minimum}, max {self.maximum}, {duplicates}"
        )


def find_owner(classes: List[CharacterClass], char: str) -> Optional[CharacterClass]:
    """Return the class currently offering ``char``."""
    for charset in classes:
        if char in charset.chars:
            return charset
    return None
