import re

import pytest

from globdir.char_class import CharClass


def _char_class(chars: str, escaped: bool = False) -> CharClass:
    result = CharClass()
    for c in chars:
        result.add(c, escaped)
    return result


def test_empty_char_class_makes_no_string() -> None:
    assert CharClass().make_string() is None


@pytest.mark.parametrize(
    ("chars", "expected"),
    [
        ("abc", "[abc]"),
        ("a-z", "[a-z]"),
        ("^ab", "[^ab]"),
        ("^", "[\\^]"),
        ("]", "[\\]]"),
        ("\\", "[\\\\]"),
        ("[", "[\\[]"),
        ("&&", "[\\&\\&]"),
    ],
)
def test_char_class_make_string(chars: str, expected: str) -> None:
    assert _char_class(chars).make_string() == expected


def test_escaped_members_are_always_literal() -> None:
    char_class = _char_class("^a-z", escaped=True)

    s = char_class.make_string()
    assert s == "[\\^a\\-z]"
    assert re.fullmatch(s, "-")
    assert re.fullmatch(s, "^")
    assert not re.fullmatch(s, "m")


def test_only_caret_is_literal_caret() -> None:
    s = _char_class("^").make_string()

    assert s is not None
    assert re.fullmatch(s, "^")
    assert not re.fullmatch(s, "a")


def test_starts_with_reports_first_raw_member() -> None:
    char_class = _char_class(".ab")

    assert char_class.starts_with(".")
    assert not char_class.starts_with("a")


def test_negated_class_does_not_start_with_dot() -> None:
    assert not _char_class("^.").starts_with(".")
