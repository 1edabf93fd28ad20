import re
from enum import IntFlag
from typing import Union

__all__ = ["DEFAULT_FLAGS", "GlobFlags"]

_FLAG_SEPARATORS = re.compile(r"[|,\s]+")


class GlobFlags(IntFlag):
    NONE = 0x00
    NO_ESCAPE = 0x01
    PATH_NAME = 0x02
    DOT_MATCH = 0x04
    IGNORE_CASE = 0x08

    @classmethod
    def parse(cls, value: Union[str, int, "GlobFlags"]) -> "GlobFlags":
        """Converts flags given as text or integer to `GlobFlags`.

        Accepts an integer, ``"none"`` or flag names separated by ``|``, ``,`` or
        whitespace, for example ``"ignore-case|dot-match"``.
        """
        if isinstance(value, int):
            return cls(value)

        text = value.strip()
        if not text:
            return cls.NONE

        if text.isdigit() or text.lower().startswith("0x"):
            return cls(int(text, 0))

        result = cls.NONE
        for part in _FLAG_SEPARATORS.split(text):
            if not part:
                continue

            name = part.upper().replace("-", "_")
            if name == "NONE":
                continue

            try:
                result |= cls[name]
            except KeyError:
                raise ValueError(f"Unknown glob flag {part!r}.") from None

        return result

    def __str__(self) -> str:
        if self == GlobFlags.NONE:
            return "none"

        return "|".join(
            f.name.lower().replace("_", "-") for f in GlobFlags if f != GlobFlags.NONE and f in self and f.name
        )


DEFAULT_FLAGS = GlobFlags.IGNORE_CASE | GlobFlags.PATH_NAME | GlobFlags.NO_ESCAPE
