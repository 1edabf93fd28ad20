import pytest

from globdir import DEFAULT_FLAGS, GlobFlags, SegmentMatcher, fnmatch
from globdir.segment import compile_segment

CASE_SENSITIVE = GlobFlags.PATH_NAME | GlobFlags.NO_ESCAPE
WITH_ESCAPES = GlobFlags.IGNORE_CASE | GlobFlags.PATH_NAME


@pytest.mark.parametrize(
    ("pattern", "name", "expected"),
    [
        ("*", "anything-without-separator", True),
        ("*", "", True),
        ("*.txt", "file.txt", True),
        ("*.txt", "file.log", False),
        ("File*.txt", "file1.txt", True),
        ("FILE.TXT", "file.txt", True),
        ("a.b", "a.b", True),
        ("a.b", "axb", False),
        ("?", "a", True),
        ("?", "ab", False),
        ("?", "/", True),
        ("??", "a", False),
        ("[abc]", "b", True),
        ("[abc]", "d", False),
        ("[a-c]x", "bx", True),
        ("[^abc]", "d", True),
        ("[^abc]", "a", False),
        ("[!a]", "!", True),
        ("[^]", "^", True),
        ("[[]", "[", True),
        ("[A-Z]", "q", True),
        ("a(b)+c", "a(b)+c", True),
        ("file", "file.txt", False),
        ("file.txt", "my-file.txt", False),
        ("\\*", "\\abc", True),
    ],
)
def test_fnmatch_with_default_flags(pattern: str, name: str, expected: bool) -> None:
    assert fnmatch(pattern, name) is expected


@pytest.mark.parametrize("name", ["a[", "a", "a[b", ""])
def test_unterminated_char_class_never_matches(name: str) -> None:
    assert not fnmatch("a[", name)
    assert not fnmatch("a[", name, GlobFlags.DOT_MATCH)


@pytest.mark.parametrize("pattern", ["[]", "[]a]", "x[]", "[z-a]"])
def test_empty_or_invalid_char_class_never_matches(pattern: str) -> None:
    assert compile_segment(pattern) is None
    assert not fnmatch(pattern, "a")
    assert not fnmatch(pattern, "]")


def test_empty_pattern_matches_only_empty_name() -> None:
    assert fnmatch("", "")
    assert not fnmatch("", "a")


def test_star_with_pathname_does_not_cross_separators() -> None:
    assert not fnmatch("*", "a/b")
    assert fnmatch("*", "a/b", GlobFlags.NONE)
    assert fnmatch("a*c", "a/b/c", GlobFlags.IGNORE_CASE)


def test_case_sensitive_matching() -> None:
    assert not fnmatch("FILE.TXT", "file.txt", CASE_SENSITIVE)
    assert fnmatch("FILE.TXT", "FILE.TXT", CASE_SENSITIVE)
    assert not fnmatch("[A-Z]", "q", CASE_SENSITIVE)


@pytest.mark.parametrize(
    ("pattern", "expected"),
    [
        ("*", False),
        ("?hidden", False),
        ("[!.]*", False),
        (".*", True),
        (".hidden", True),
        ("[.]*", True),
        ("[.h]*", True),
        ("[^a]*", False),
    ],
)
def test_leading_dot_needs_explicit_dot(pattern: str, expected: bool) -> None:
    assert fnmatch(pattern, ".hidden") is expected


@pytest.mark.parametrize("pattern", ["*", "?hidden", "[.]*", "*hidden"])
def test_dot_match_lets_wildcards_match_leading_dot(pattern: str) -> None:
    assert fnmatch(pattern, ".hidden", DEFAULT_FLAGS | GlobFlags.DOT_MATCH)


def test_dot_rule_only_applies_to_the_first_character() -> None:
    assert fnmatch("*.txt", "file.txt")
    assert fnmatch("a*", "a.b")


@pytest.mark.parametrize(
    ("pattern", "name", "expected"),
    [
        ("\\*", "*", True),
        ("\\*", "a", False),
        ("\\?", "?", True),
        ("\\[a]", "[a]", True),
        ("[\\]]", "]", True),
        ("[a\\-z]", "-", True),
        ("[a\\-z]", "m", False),
        ("\\.hidden", ".hidden", True),
        ("[\\.]*", ".hidden", True),
        ("a\\", "a\\", True),
    ],
)
def test_backslash_escapes_without_no_escape(pattern: str, name: str, expected: bool) -> None:
    assert fnmatch(pattern, name, WITH_ESCAPES) is expected


def test_backslash_is_literal_with_no_escape() -> None:
    assert fnmatch("a\\b", "a\\b")
    assert not fnmatch("\\*", "*x", WITH_ESCAPES)
    assert fnmatch("\\*", "\\*x")


def test_segment_matcher_is_reusable() -> None:
    matcher = SegmentMatcher("File?.txt")

    assert [n for n in ["File1.txt", "file2.TXT", "File10.txt", ".File1.txt"] if matcher(n)] == [
        "File1.txt",
        "file2.TXT",
    ]
    assert "File?.txt" in repr(matcher)


def test_fnmatch_fails_fast_on_non_string_pattern() -> None:
    with pytest.raises(TypeError):
        fnmatch(None, "a")  # type: ignore[arg-type]
