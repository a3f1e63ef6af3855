"""Sets of cube faces."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

_FACE_BITS = (
    ("Right", 1),
    ("Top", 2),
    ("Back", 4),
    ("Left", 8),
    ("Bottom", 16),
    ("Front", 32),
)
_ALL_BITS = 0b111111


@dataclass(frozen=True)
class Faces:
    """A set of zero or more faces of a cube, stored as a bitmask."""

    bits: int = 0

    RIGHT: ClassVar[Faces]
    TOP: ClassVar[Faces]
    BACK: ClassVar[Faces]
    LEFT: ClassVar[Faces]
    BOTTOM: ClassVar[Faces]
    FRONT: ClassVar[Faces]

    def __post_init__(self) -> None:
        if isinstance(self.bits, bool) or not isinstance(self.bits, int):
            raise TypeError(f"faces bits must be an int, not {type(self.bits).__name__}")
        if self.bits < 0 or self.bits & ~_ALL_BITS:
            raise ValueError("value must be a u8 bitmask of faces")

    @classmethod
    def empty(cls) -> Faces:
        """Return the set holding no faces."""
        return cls(0)

    @classmethod
    def all(cls) -> Faces:
        """Return the set holding every face."""
        return cls(_ALL_BITS)

    @classmethod
    def from_bits(cls, bits: int) -> Faces:
        """Build a set from its bitmask; raise ValueError for unknown bits."""
        return cls(bits)

    def contains(self, other: Faces) -> bool:
        """Tell whether every face of ``other`` is in this set."""
        return self.bits & other.bits == other.bits

    def names(self) -> list[str]:
        """Return the names of the faces in this set, in bit order."""
        return [name for name, bit in _FACE_BITS if self.bits & bit]

    def __len__(self) -> int:
        return bin(self.bits).count("1")

    def __or__(self, other: Faces) -> Faces:
        if not isinstance(other, Faces):
            return NotImplemented
        return Faces(self.bits | other.bits)

    def __and__(self, other: Faces) -> Faces:
        if not isinstance(other, Faces):
            return NotImplemented
        return Faces(self.bits & other.bits)

    def __repr__(self) -> str:
        return f"Faces({', '.join(self.names())})"

    def to_json(self) -> list[str]:
        """Return the JSON form: a list of face names."""
        return self.names()

    @classmethod
    def from_json(cls, data: Any) -> Faces:
        """Build a set from a list of face names; duplicates are allowed."""
        if isinstance(data, (str, bytes)) or not isinstance(data, (list, tuple)):
            raise TypeError("expected a list of strings representing faces")
        lookup = dict(_FACE_BITS)
        bits = 0
        for face in data:
            if not isinstance(face, str):
                raise TypeError("expected a list of strings representing faces")
            try:
                bits |= lookup[face]
            except KeyError:
                raise ValueError(f"invalid face '{face}'") from None
        return cls(bits)


Faces.RIGHT = Faces(1)
Faces.TOP = Faces(2)
Faces.BACK = Faces(4)
Faces.LEFT = Faces(8)
Faces.BOTTOM = Faces(16)
Faces.FRONT = Faces(32)