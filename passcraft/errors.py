"""
passcraft.errors
Exception types and the error kinds carried by generation results.
"""

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_ARGUMENT = "invalid_argument"
    NO_CHARACTER_CLASS_SELECTED = "no_character_class_selected"
    LENGTH_TOO_SHORT_FOR_SELECTION = "length_too_short_for_selection"


class PasscraftError(Exception):
    """Base class for all passcraft errors."""


class InvalidArgument(PasscraftError, ValueError):
    """
    A malformed bound reached the random source.
    Validated input never triggers this; treat it as a bug, not a user error.
    """

    kind = ErrorKind.INVALID_ARGUMENT


class GenerationError(PasscraftError, ValueError):
    """Raised by GenerationResult.unwrap() when generation failed."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message


class SecureRandomUnavailable(PasscraftError, RuntimeError):
    """No cryptographically secure generator and the insecure fallback is disallowed."""
