"""Optional unique references to instances."""

from __future__ import annotations

import re
import secrets
from dataclasses import dataclass
from typing import Any

_MAX = (1 << 128) - 1
_HEX_RE = re.compile(r"\+?[0-9a-fA-F]+")


def _parse_hex(text: str) -> int:
    if not isinstance(text, str):
        raise TypeError("expected a hexadecimal string")
    if not _HEX_RE.fullmatch(text):
        raise ValueError(f"invalid digit found in string: {text!r}")
    value = int(text.lstrip("+"), 16)
    if value > _MAX:
        raise ValueError("number too large to fit in target type")
    return value


@dataclass(frozen=True)
class Ref:
    """A 128-bit reference to an instance; zero means it points to nothing."""

    value: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"ref value must be an int, not {type(self.value).__name__}")
        if not 0 <= self.value <= _MAX:
            raise ValueError("ref value must fit in an unsigned 128-bit integer")

    @classmethod
    def new(cls) -> Ref:
        """Generate a new random, non-null reference."""
        while True:
            value = secrets.randbits(128)
            if value:
                return cls(value)

    @classmethod
    def none(cls) -> Ref:
        """Return the reference that points to nothing."""
        return cls(0)

    def is_some(self) -> bool:
        """Tell whether this reference points to something."""
        return self.value != 0

    def is_none(self) -> bool:
        """Tell whether this reference points to nothing."""
        return self.value == 0

    def __bool__(self) -> bool:
        return self.is_some()

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"{self.value:032x}"

    @classmethod
    def from_str(cls, text: str) -> Ref:
        """Parse a hexadecimal reference; raise ValueError on bad input."""
        return cls(_parse_hex(text))

    def to_json(self) -> str:
        """Return the JSON form: 32 lower-case hexadecimal digits."""
        return str(self)

    @classmethod
    def from_json(cls, data: Any) -> Ref:
        """Build a reference from its hexadecimal JSON string."""
        return cls.from_str(data)