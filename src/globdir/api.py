from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Iterator, List, Optional, TypeVar, Union, overload

from .flags import DEFAULT_FLAGS, GlobFlags
from .matcher import GlobMatcher
from .provider import FileSystemProvider, NamespaceProvider
from .ungroup import ungroup_globs
from .utils.logging import LoggingDescriptor

__all__ = ["get_matches", "glob"]

T = TypeVar("T")
FlagsLike = Union[GlobFlags, int, str]

_logger = LoggingDescriptor(name=__name__)


@overload
def get_matches(pattern: str, flags: FlagsLike = ..., provider: None = None) -> Iterator[Path]: ...


@overload
def get_matches(pattern: str, flags: FlagsLike = ..., *, provider: NamespaceProvider[T]) -> Iterator[T]: ...


@overload
def get_matches(pattern: str, flags: FlagsLike, provider: NamespaceProvider[T]) -> Iterator[T]: ...


@_logger.call
def get_matches(
    pattern: str,
    flags: FlagsLike = DEFAULT_FLAGS,
    provider: Optional[NamespaceProvider[Any]] = None,
) -> Iterator[Any]:
    """Lazily yields all entries of the namespace matching the glob `pattern`.

    The pattern is split into its brace alternatives first, the matches of each alternative are
    yielded in turn. Entries matched by more than one alternative are yielded more than once.

    `flags` may also be given as text, e.g. ``"ignore-case|dot-match"``, see `GlobFlags.parse`.
    Without a `provider` the local file system is searched and `pathlib.Path` objects are returned.
    """
    if not isinstance(pattern, str):
        raise TypeError(f"pattern must be a str, not {type(pattern).__name__}")

    if provider is None:
        provider = FileSystemProvider()
    elif not isinstance(provider, NamespaceProvider):
        raise TypeError(f"provider must be a NamespaceProvider, not {type(provider).__name__}")

    return _get_matches(pattern, GlobFlags.parse(flags), provider)


def _get_matches(pattern: str, flags: GlobFlags, provider: NamespaceProvider[T]) -> Iterator[T]:
    if not pattern:
        return

    no_escape = GlobFlags.NO_ESCAPE in flags
    if no_escape and os.sep == "\\":
        pattern = pattern.replace("\\", "/")

    groups = ungroup_globs(pattern, no_escape)
    if not groups:
        _logger.debug(lambda: f"pattern {pattern!r} has unbalanced braces")
        return

    for group in groups:
        yield from GlobMatcher(provider, group, flags).do_glob()


def glob(
    pattern: Union[str, "os.PathLike[str]"],
    flags: FlagsLike = DEFAULT_FLAGS,
    provider: Optional[NamespaceProvider[Any]] = None,
) -> List[Any]:
    """Returns all matches of `pattern` as a list, see `get_matches`."""
    return list(get_matches(os.fspath(pattern), flags, provider))
