"""
passcraft.generator
Secure password composer.

Every enabled character class is guaranteed at least one character, the rest
is filled from the combined pool, and the whole buffer is shuffled so the
guaranteed characters don't sit in predictable positions.
"""

import logging
from dataclasses import dataclass, field
from typing import FrozenSet, Optional

from .charsets import ALL_CLASSES, CharacterClass, OptionsLike, build_pools, parse_options
from .errors import ErrorKind, GenerationError
from .randomsource import RandomSource, default_source

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationRequest:
    length: int
    options: FrozenSet[CharacterClass] = field(default=ALL_CLASSES)

    def __post_init__(self):
        object.__setattr__(self, "options", parse_options(self.options))


@dataclass(frozen=True)
class GenerationResult:
    password: Optional[str] = None
    error: Optional[ErrorKind] = None
    message: str = ""
    secure: bool = True

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        if self.error is not None:
            raise GenerationError(self.error, self.message)
        return self.password

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "GenerationResult":
        return cls(password=None, error=kind, message=message)


def _validate(request: GenerationRequest, pool_count: int) -> Optional[GenerationResult]:
    length = request.length
    if isinstance(length, bool) or not isinstance(length, int):
        return GenerationResult.failure(
            ErrorKind.INVALID_ARGUMENT, f"Length must be an integer, got {length!r}."
        )
    if pool_count == 0:
        return GenerationResult.failure(
            ErrorKind.NO_CHARACTER_CLASS_SELECTED, "Select at least one character option."
        )
    if length < pool_count:
        return GenerationResult.failure(
            ErrorKind.LENGTH_TOO_SHORT_FOR_SELECTION,
            f"Length must be at least {pool_count} to include each selected type.",
        )
    return None


def compose(request: GenerationRequest, source: Optional[RandomSource] = None) -> GenerationResult:
    """
    Build a password for `request`.

    User-correctable problems come back as a failed GenerationResult with no
    password. No randomness is drawn until validation has passed.
    """
    pools = build_pools(request.options)
    failure = _validate(request, len(pools))
    if failure is not None:
        log.debug("rejected generation request: %s", failure.error.value)
        return failure

    if source is None:
        source = default_source()

    # one guaranteed character per selected class
    chars = [source.choice(pool) for pool in pools]

    combined = "".join(pools)
    while len(chars) < request.length:
        chars.append(source.choice(combined))

    source.shuffle(chars)

    log.debug(
        "generated password: length=%d classes=%d source=%s",
        request.length, len(pools), source.name,
    )
    return GenerationResult(password="".join(chars), secure=source.secure)


def generate(
    length: int = 16,
    options: OptionsLike = ALL_CLASSES,
    source: Optional[RandomSource] = None,
) -> GenerationResult:
    """Generate a password of `length` characters from the enabled `options`."""
    return compose(GenerationRequest(length=length, options=options), source)
