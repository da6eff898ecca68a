"""
passcraft.charsets
Character classes and the pools they map to.
"""

import string
from enum import Enum
from typing import FrozenSet, Iterable, List, Optional, Set, Union


class CharacterClass(Enum):
    # declaration order is the canonical pool order
    UPPER = "upper"
    LOWER = "lower"
    DIGIT = "digit"
    SYMBOL = "symbol"

    @property
    def characters(self) -> str:
        return CHARSETS[self]

    @classmethod
    def parse(cls, value: Union["CharacterClass", str]) -> "CharacterClass":
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        try:
            return _ALIASES[key]
        except KeyError:
            raise ValueError(f"unknown character class: {value!r}") from None


SYMBOLS = "!@#$%^&*()-_=+[]{};:,.<>?/|~"

CHARSETS = {
    CharacterClass.UPPER: string.ascii_uppercase,
    CharacterClass.LOWER: string.ascii_lowercase,
    CharacterClass.DIGIT: string.digits,
    CharacterClass.SYMBOL: SYMBOLS,
}

_ALIASES = {
    "upper": CharacterClass.UPPER,
    "uppercase": CharacterClass.UPPER,
    "lower": CharacterClass.LOWER,
    "lowercase": CharacterClass.LOWER,
    "digit": CharacterClass.DIGIT,
    "digits": CharacterClass.DIGIT,
    "numbers": CharacterClass.DIGIT,
    "symbol": CharacterClass.SYMBOL,
    "symbols": CharacterClass.SYMBOL,
}

ALL_CLASSES: FrozenSet[CharacterClass] = frozenset(CharacterClass)

OptionsLike = Iterable[Union[CharacterClass, str]]


def parse_options(values: Union[OptionsLike, CharacterClass, str]) -> FrozenSet[CharacterClass]:
    # a lone name or member, not a collection of them
    if isinstance(values, (str, CharacterClass)):
        values = [values]
    return frozenset(CharacterClass.parse(v) for v in values)


def build_pools(options: OptionsLike) -> List[str]:
    """
    Return one pool per enabled class, always in UPPER, LOWER, DIGIT, SYMBOL order.
    An empty selection gives an empty list; the caller decides whether that's an error.
    """
    enabled = parse_options(options)
    return [CHARSETS[c] for c in CharacterClass if c in enabled]


def classify(char: str) -> Optional[CharacterClass]:
    if len(char) != 1:
        return None
    for cls, chars in CHARSETS.items():
        if char in chars:
            return cls
    return None


def classes_in(password: str) -> Set[CharacterClass]:
    found = set()
    for ch in password:
        cls = classify(ch)
        if cls is not None:
            found.add(cls)
    return found
