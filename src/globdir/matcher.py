from __future__ import annotations

import re
from typing import Generic, Iterator, Tuple, TypeVar

from .flags import DEFAULT_FLAGS, GlobFlags
from .provider import NamespaceProvider
from .segment import WILDCARD_CHARS, SegmentMatcher
from .utils.logging import LoggingDescriptor

__all__ = ["GlobMatcher", "unescape"]

T = TypeVar("T")

SEPARATOR_CHARS = "/:"

_ESCAPE_RE = re.compile(r"([\\*?\[])")


def unescape(path: str) -> str:
    result = []
    in_escape = False
    for c in path:
        if in_escape:
            in_escape = False
        elif c == "\\":
            in_escape = True
            continue
        result.append(c)

    if in_escape:
        result.append("\\")

    return "".join(result)


def _join(base: str, name: str) -> str:
    if base.endswith("/"):
        return base + name
    return base + "/" + name


class GlobMatcher(Generic[T]):
    """Walks a namespace for one brace free glob pattern.

    The pattern is consumed segment by segment. Runs of segments without wildcards are appended to
    the base path without listing anything, only segments with wildcards list their directory.
    A ``**`` segment matches zero or more directories.
    """

    _logger = LoggingDescriptor()

    def __init__(self, provider: NamespaceProvider[T], pattern: str, flags: GlobFlags = DEFAULT_FLAGS) -> None:
        self.provider = provider
        self.pattern = "*" if pattern == "**" else pattern
        self.flags = flags
        self.dir_only = self.pattern.endswith("/")
        self._relative = False

    @property
    def no_escape(self) -> bool:
        return GlobFlags.NO_ESCAPE in self.flags

    def find_next_separator(self, position: int, allow_wildcard: bool) -> Tuple[int, bool]:
        """Finds the end of the next part of the pattern that has to be handled at once.

        If a wildcard follows some separators, the part ends at the last of these separators, so all
        literal segments before a wildcard segment are consumed together. Otherwise the part ends at the
        first separator behind the wildcard. Returns the end index and whether the part contains a
        wildcard.
        """
        pattern = self.pattern
        last_separator = -1
        contains_wildcard = False
        in_escape = False

        for i in range(position, len(pattern)):
            if in_escape:
                in_escape = False
                continue

            c = pattern[i]
            if c == "\\" and not self.no_escape:
                in_escape = True
                continue

            if c in WILDCARD_CHARS:
                if not allow_wildcard:
                    return last_separator + 1, contains_wildcard
                if last_separator >= 0:
                    return last_separator, contains_wildcard
                contains_wildcard = True
            elif c in SEPARATOR_CHARS:
                if contains_wildcard:
                    return i, contains_wildcard
                last_separator = i

        return len(pattern), contains_wildcard

    def _query_path(self, path: str) -> str:
        return path if self.no_escape else unescape(path)

    def _escape_name(self, name: str) -> str:
        return name if self.no_escape else _ESCAPE_RE.sub(r"\\\1", name)

    def do_glob(self) -> Iterator[T]:
        pattern = self.pattern
        if not pattern:
            return

        position = 0
        base_directory = "."
        if pattern[0] == "/" or ":" in pattern:
            position, _ = self.find_next_separator(0, False)
            if position == len(pattern):
                yield from self._test_path(pattern, position, True)
                return

            if position > 0 or pattern[0] == "/":
                base_directory = pattern[:position]

        self._relative = base_directory == "."

        yield from self._do_glob(base_directory, position, False)

    def _test_path(self, path: str, pattern_end: int, is_last_segment: bool) -> Iterator[T]:
        if not is_last_segment:
            yield from self._do_glob(path, pattern_end, False)
            return

        path = self._query_path(path)
        if self._relative and path.startswith("./"):
            path = path[2:]

        self._logger.trace(lambda: f"test {path!r}")

        entry = self.provider.find_directory(path)
        if entry is not None:
            yield entry
        elif not self.dir_only:
            entry = self.provider.find_file(path)
            if entry is not None:
                yield entry

    def _do_glob(self, base_directory: str, position: int, is_previous_double_star: bool) -> Iterator[T]:
        if self.provider.find_directory(self._query_path(base_directory)) is None:
            return

        pattern_end, contains_wildcard = self.find_next_separator(position, True)
        is_last_segment = pattern_end == len(self.pattern)
        segment = self.pattern[position:pattern_end]

        if not is_last_segment:
            pattern_end += 1

        if not contains_wildcard:
            yield from self._test_path(_join(base_directory, segment), pattern_end, is_last_segment)
            return

        double_star = segment == "**"
        if double_star and not is_previous_double_star:
            # ** stands for no directory at all
            yield from self._do_glob(base_directory, pattern_end, True)

        matcher = SegmentMatcher(segment, self.flags)

        self._logger.trace(lambda: f"list {base_directory!r} for {segment!r}")

        for entry in self.provider.list(self._query_path(base_directory), "*"):
            name = self.provider.entry_name(entry)
            if not matcher.matches(name):
                continue

            path = _join(base_directory, self._escape_name(name))
            yield from self._test_path(path, pattern_end, is_last_segment)

            if double_star:
                yield from self._do_glob(path, position, True)

        # . and .. are never listed, they must be matched explicitly
        if not segment.startswith(".") and (not is_last_segment or GlobFlags.DOT_MATCH not in self.flags):
            return

        for special in (".", ".."):
            if matcher.matches(special):
                yield from self._test_path(_join(base_directory, special), pattern_end, is_last_segment)
