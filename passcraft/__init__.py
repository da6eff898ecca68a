"""passcraft: secure random password generation."""

from .charsets import ALL_CLASSES, CharacterClass, build_pools
from .errors import ErrorKind, GenerationError, InvalidArgument, SecureRandomUnavailable
from .generator import GenerationRequest, GenerationResult, compose, generate
from .randomsource import RandomSource, SystemRandomSource, default_source, secure_random_available

__version__ = "0.1.0"

__all__ = [
    "ALL_CLASSES",
    "CharacterClass",
    "ErrorKind",
    "GenerationError",
    "GenerationRequest",
    "GenerationResult",
    "InvalidArgument",
    "RandomSource",
    "SecureRandomUnavailable",
    "SystemRandomSource",
    "build_pools",
    "compose",
    "default_source",
    "generate",
    "secure_random_available",
]
