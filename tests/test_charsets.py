import string

import pytest

from passcraft.charsets import (
    ALL_CLASSES,
    SYMBOLS,
    CharacterClass,
    build_pools,
    classes_in,
    classify,
    parse_options,
)


def test_pools_in_canonical_order():
    pools = build_pools([CharacterClass.SYMBOL, CharacterClass.UPPER, CharacterClass.DIGIT])
    assert pools == [string.ascii_uppercase, string.digits, SYMBOLS]


def test_all_classes():
    pools = build_pools(ALL_CLASSES)
    assert pools == [string.ascii_uppercase, string.ascii_lowercase, string.digits, SYMBOLS]


def test_empty_selection_gives_no_pools():
    assert build_pools(set()) == []


def test_every_class_is_non_empty():
    for cls in CharacterClass:
        assert cls.characters


def test_classes_do_not_overlap():
    seen = set()
    for cls in CharacterClass:
        chars = set(cls.characters)
        assert not (chars & seen)
        seen |= chars


def test_parse_names_and_aliases():
    assert parse_options(["upper", "Numbers", "symbols", CharacterClass.LOWER]) == ALL_CLASSES
    assert CharacterClass.parse("digits") is CharacterClass.DIGIT


def test_parse_unknown_name():
    with pytest.raises(ValueError):
        parse_options(["emoji"])


def test_classify():
    assert classify("Q") is CharacterClass.UPPER
    assert classify("q") is CharacterClass.LOWER
    assert classify("7") is CharacterClass.DIGIT
    assert classify("~") is CharacterClass.SYMBOL
    assert classify(" ") is None
    assert classify("") is None


def test_classes_in():
    assert classes_in("aB3") == {CharacterClass.UPPER, CharacterClass.LOWER, CharacterClass.DIGIT}
    assert classes_in("") == set()


def test_single_name_is_not_split_into_characters():
    assert parse_options("upper") == frozenset({CharacterClass.UPPER})
    assert parse_options(CharacterClass.DIGIT) == frozenset({CharacterClass.DIGIT})
    assert build_pools("symbols") == [SYMBOLS]
