"""
Custom exceptions for Passmint.
"""

from enum import Enum


class PassmintException(Exception):
    """Base exception for Passmint."""

    pass


class ConfigError(PassmintException):
    """Configuration file could not be read or written."""

    pass


class ErrorKind(Enum):
    """Classification of every way a generation request can fail."""

    INVALID_LENGTH = "InvalidLength"
    NO_CHARACTERS_SELECTED = "NoCharactersSelected"
    INVALID_BOUNDS = "InvalidBounds"
    INSUFFICIENT_UNIQUE_CHARACTERS = "InsufficientUniqueCharacters"
    NO_LETTER_AVAILABLE = "NoLetterAvailable"
    MAX_SUM_TOO_LOW = "MaxSumTooLow"
    MIN_SUM_TOO_HIGH = "MinSumTooHigh"
    UNSATISFIABLE = "Unsatisfiable"


class GenerationError(PassmintException):
    """Password could not be generated from the given request."""

    kind: ErrorKind
    default_message = "Password generation failed."

    def __init__(self, message: str = ""):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class InvalidLengthError(GenerationError):
    """Target length is missing, not a number, or below 1."""

    kind = ErrorKind.INVALID_LENGTH
    default_message = "Password length must be a number greater than 0."


class NoCharactersSelectedError(GenerationError):
    """No character class is active after normalization."""

    kind = ErrorKind.NO_CHARACTERS_SELECTED
    default_message = "You must select at least one character."


class InvalidBoundsError(GenerationError):
    """A class has a missing or negative bound, or min above max."""

    kind = ErrorKind.INVALID_BOUNDS
    default_message = "Every min and max field must be a number greater than or equal to 0."


class InsufficientUniqueCharactersError(GenerationError):
    """A no-duplicates class cannot supply its minimum."""

    kind = ErrorKind.INSUFFICIENT_UNIQUE_CHARACTERS
    default_message = (
        "At least one character set with duplicates disabled has too few "
        "characters to meet its required minimum."
    )


class NoLetterAvailableError(GenerationError):
    """Password must begin with a letter but no active class has one."""

    kind = ErrorKind.NO_LETTER_AVAILABLE
    default_message = "Password must begin with a letter but no letters are selected."


class MaxSumTooLowError(GenerationError):
    """Maximums cannot add up to the target length."""

    kind = ErrorKind.MAX_SUM_TOO_LOW
    default_message = "Total sum of maximums must be greater than or equal to password length."


class MinSumTooHighError(GenerationError):
    """Minimums add up to more than the target length."""

    kind = ErrorKind.MIN_SUM_TOO_HIGH
    default_message = "Total sum of minimums must be less than or equal to password length."


class UnsatisfiableError(GenerationError):
    """Eligible pool ran dry before the target length was reached."""

    kind = ErrorKind.UNSATISFIABLE
    default_message = (
        "Minimums, maximums, disallowing duplicates, and/or requiring a letter "
        "at the beginning prevented the generator from reaching the desired "
        "password length."
    )
