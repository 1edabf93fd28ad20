from __future__ import annotations

import re
from typing import List, NamedTuple, Optional, Tuple

from .char_class import CharClass
from .flags import DEFAULT_FLAGS, GlobFlags

__all__ = ["CompiledSegment", "SegmentMatcher", "compile_segment", "fnmatch"]

WILDCARD_CHARS = "*?["


class CompiledSegment(NamedTuple):
    regex: "re.Pattern[str]"
    explicit_dot: bool


def _segment_to_re(pattern: str, path_name: bool, no_escape: bool) -> Optional[Tuple[str, bool]]:
    parts: List[str] = []
    explicit_dot = False

    in_escape = False
    char_class: Optional[CharClass] = None

    for c in pattern:
        if in_escape:
            in_escape = False
            if char_class is not None:
                char_class.add(c, escaped=True)
            else:
                if not parts and c == ".":
                    explicit_dot = True
                parts.append(re.escape(c))
            continue

        if c == "\\" and not no_escape:
            in_escape = True
            continue

        if char_class is not None:
            if c == "]":
                s = char_class.make_string()
                if s is None:
                    return None
                if not parts and char_class.starts_with("."):
                    explicit_dot = True
                parts.append(s)
                char_class = None
            else:
                char_class.add(c)
            continue

        if c == "*":
            parts.append("[^/]*" if path_name else ".*")
        elif c == "?":
            parts.append(".")
        elif c == "[":
            char_class = CharClass()
        else:
            if not parts and c == ".":
                explicit_dot = True
            parts.append(re.escape(c))

    if char_class is not None:
        return None

    # a trailing lone backslash stands for itself
    if in_escape:
        parts.append(re.escape("\\"))

    return "".join(parts), explicit_dot


def compile_segment(pattern: str, flags: GlobFlags = DEFAULT_FLAGS) -> Optional[CompiledSegment]:
    """Compiles a single path segment glob.

    Returns `None` if the segment can never match, e.g. because of an unterminated or empty
    character class.
    """
    translated = _segment_to_re(pattern, GlobFlags.PATH_NAME in flags, GlobFlags.NO_ESCAPE in flags)
    if translated is None:
        return None

    regex, explicit_dot = translated
    re_flags = re.DOTALL | re.IGNORECASE if GlobFlags.IGNORE_CASE in flags else re.DOTALL
    try:
        return CompiledSegment(re.compile(regex, re_flags), explicit_dot)
    except re.error:
        # e.g. a reversed range like [z-a]
        return None


class SegmentMatcher:
    """A segment pattern compiled once and matched against many names."""

    def __init__(self, pattern: str, flags: GlobFlags = DEFAULT_FLAGS) -> None:
        if not isinstance(pattern, str):
            raise TypeError(f"pattern must be a str, not {type(pattern).__name__}")

        self.pattern = pattern
        self.flags = flags
        self.compiled = compile_segment(pattern, flags) if pattern else None

    def matches(self, name: str) -> bool:
        if not self.pattern:
            return not name

        if self.compiled is None:
            return False

        # a leading dot is only matched by an explicit dot in the pattern
        if GlobFlags.DOT_MATCH not in self.flags and name.startswith(".") and not self.compiled.explicit_dot:
            return False

        return self.compiled.regex.fullmatch(name) is not None

    __call__ = matches

    def __repr__(self) -> str:
        return f"{type(self).__qualname__}(pattern={self.pattern!r}, flags={self.flags!s})"


def fnmatch(pattern: str, name: str, flags: GlobFlags = DEFAULT_FLAGS) -> bool:
    """Tests whether `name` matches the single segment glob `pattern` as a whole."""
    return SegmentMatcher(pattern, flags).matches(name)
