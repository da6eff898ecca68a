"""
passcraft.randomsource
Unbiased bounded random integers on top of a 32-bit word generator.

Every draw goes through RandomSource.uniform_int(), which uses rejection
sampling so that bounds not dividing 2**32 get no modulo bias.
The OS CSPRNG (via the secrets module) is the normal path. A Mersenne Twister
fallback exists for platforms without one; it is flagged `secure = False`
and announced with a warning, never picked silently.
"""

import logging
import os
import random
import secrets
import threading
from abc import ABC, abstractmethod
from typing import List, MutableSequence, Optional, Sequence, TypeVar

from .errors import InvalidArgument, SecureRandomUnavailable

log = logging.getLogger(__name__)

UINT32_RANGE = 1 << 32

T = TypeVar("T")


class RandomSource(ABC):
    """Injectable source of uniform random integers."""

    name = "abstract"
    secure = True

    @abstractmethod
    def next_uint32(self) -> int:
        """Return one uniformly distributed value in [0, 2**32)."""

    def uniform_int(self, max_exclusive: int) -> int:
        """
        Return an integer uniformly distributed in [0, max_exclusive).

        Draws falling at or above the largest multiple of max_exclusive
        that fits in 2**32 are discarded and redrawn.
        """
        if isinstance(max_exclusive, bool) or not isinstance(max_exclusive, int):
            raise InvalidArgument(f"max_exclusive must be an integer, got {max_exclusive!r}")
        if max_exclusive <= 0:
            raise InvalidArgument(f"max_exclusive must be positive, got {max_exclusive}")
        if max_exclusive > UINT32_RANGE:
            raise InvalidArgument(f"max_exclusive must not exceed 2**32, got {max_exclusive}")

        limit = UINT32_RANGE - (UINT32_RANGE % max_exclusive)
        while True:
            value = self.next_uint32()
            if value < limit:
                return value % max_exclusive

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise InvalidArgument("cannot choose from an empty sequence")
        return seq[self.uniform_int(len(seq))]

    def shuffle(self, items: MutableSequence) -> None:
        """Fisher-Yates shuffle in place."""
        for i in range(len(items) - 1, 0, -1):
            j = self.uniform_int(i + 1)
            items[i], items[j] = items[j], items[i]


class SystemRandomSource(RandomSource):
    """OS CSPRNG via secrets.randbits."""

    name = "system"
    secure = True

    @classmethod
    def available(cls) -> bool:
        try:
            os.urandom(4)
        except NotImplementedError:
            return False
        return True

    def next_uint32(self) -> int:
        return secrets.randbits(32)


class FallbackRandomSource(RandomSource):
    """
    Mersenne Twister source for platforms lacking a CSPRNG.
    NOT cryptographically secure.
    """

    name = "fallback"
    secure = False

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)
        self._lock = threading.Lock()

    def next_uint32(self) -> int:
        with self._lock:
            return self._rng.getrandbits(32)


class SeededRandomSource(FallbackRandomSource):
    """Reproducible source for tests; same rejection sampling as the others."""

    name = "seeded"

    def __init__(self, seed: int):
        super().__init__(seed)


class SequenceRandomSource(RandomSource):
    """Replays a fixed list of 32-bit words. Useful to pin down exact draws."""

    name = "sequence"
    secure = False

    def __init__(self, words: List[int]):
        self._words = list(words)
        self._pos = 0
        self._lock = threading.Lock()

    @property
    def consumed(self) -> int:
        return self._pos

    def next_uint32(self) -> int:
        with self._lock:
            if self._pos >= len(self._words):
                raise RuntimeError("sequence source exhausted")
            value = self._words[self._pos]
            self._pos += 1
        return value


_default: Optional[RandomSource] = None
_default_lock = threading.Lock()


def secure_random_available() -> bool:
    return SystemRandomSource.available()


def default_source(allow_insecure: bool = True) -> RandomSource:
    """
    Return the process-wide random source, creating it on first use.

    Raises SecureRandomUnavailable when the platform has no CSPRNG and
    allow_insecure is False.
    """
    global _default
    with _default_lock:
        if _default is not None and (_default.secure or allow_insecure):
            return _default
        if secure_random_available():
            _default = SystemRandomSource()
            return _default
        if not allow_insecure:
            raise SecureRandomUnavailable(
                "no cryptographically secure random generator is available on this platform"
            )
        log.warning(
            "No cryptographically secure random generator available; "
            "falling back to a NON-SECURE generator. Generated passwords are predictable."
        )
        _default = FallbackRandomSource()
        return _default


def reset_default_source() -> None:
    """Forget the cached default so the next call re-probes the platform."""
    global _default
    with _default_lock:
        _default = None
