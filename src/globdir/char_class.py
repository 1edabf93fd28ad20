from typing import List, Optional

__all__ = ["CharClass"]

# characters that must be escaped inside a python ``re`` character set
_SET_SPECIAL_CHARS = frozenset("]\\[&~|")


class CharClass:
    """Collects the members of a bracket expression and renders them as a regular expression set.

    The members are passed in exactly as they appear between ``[`` and ``]``. A leading ``^`` negates the
    set, ``-`` between two members builds a range. Members which came from an escape sequence are always
    taken literally.
    """

    def __init__(self) -> None:
        self._chars: List[str] = []
        self._first: Optional[str] = None

    def add(self, c: str, escaped: bool = False) -> None:
        if self._first is None:
            self._first = c

        if c in _SET_SPECIAL_CHARS or (escaped and c in "-^"):
            self._chars.append("\\")
        self._chars.append(c)

    def starts_with(self, c: str) -> bool:
        return self._first == c

    def make_string(self) -> Optional[str]:
        if not self._chars:
            return None

        if self._chars == ["^"]:
            return "[\\^]"

        return "[" + "".join(self._chars) + "]"

    def __repr__(self) -> str:
        return f"{type(self).__qualname__}({''.join(self._chars)!r})"
