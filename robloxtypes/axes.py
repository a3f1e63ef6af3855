"""Sets of 3D axes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

_AXIS_BITS = (("X", 1), ("Y", 2), ("Z", 4))
_ALL_BITS = 0b111


@dataclass(frozen=True)
class Axes:
    """A set of zero or more of the X, Y and Z axes, stored as a bitmask."""

    bits: int = 0

    X: ClassVar[Axes]
    Y: ClassVar[Axes]
    Z: ClassVar[Axes]

    def __post_init__(self) -> None:
        if isinstance(self.bits, bool) or not isinstance(self.bits, int):
            raise TypeError(f"axes bits must be an int, not {type(self.bits).__name__}")
        if self.bits < 0 or self.bits & ~_ALL_BITS:
            raise ValueError("value must be a u8 bitmask of axes")

    @classmethod
    def empty(cls) -> Axes:
        """Return the set holding no axes."""
        return cls(0)

    @classmethod
    def all(cls) -> Axes:
        """Return the set holding every axis."""
        return cls(_ALL_BITS)

    @classmethod
    def from_bits(cls, bits: int) -> Axes:
        """Build a set from its bitmask; raise ValueError for unknown bits."""
        return cls(bits)

    def contains(self, other: Axes) -> bool:
        """Tell whether every axis of ``other`` is in this set."""
        return self.bits & other.bits == other.bits

    def names(self) -> list[str]:
        """Return the names of the axes in this set, in X, Y, Z order."""
        return [name for name, bit in _AXIS_BITS if self.bits & bit]

    def __len__(self) -> int:
        return bin(self.bits).count("1")

    def __or__(self, other: Axes) -> Axes:
        if not isinstance(other, Axes):
            return NotImplemented
        return Axes(self.bits | other.bits)

    def __and__(self, other: Axes) -> Axes:
        if not isinstance(other, Axes):
            return NotImplemented
        return Axes(self.bits & other.bits)

    def __repr__(self) -> str:
        return f"Axes({', '.join(self.names())})"

    def to_json(self) -> list[str]:
        """Return the JSON form: a list of axis names."""
        return self.names()

    @classmethod
    def from_json(cls, data: Any) -> Axes:
        """Build a set from a list of axis names; duplicates are allowed."""
        if isinstance(data, (str, bytes)) or not isinstance(data, (list, tuple)):
            raise TypeError("expected a list of strings representing axes")
        lookup = dict(_AXIS_BITS)
        bits = 0
        for axis in data:
            if not isinstance(axis, str):
                raise TypeError("expected a list of strings representing axes")
            try:
                bits |= lookup[axis]
            except KeyError:
                raise ValueError(f"invalid axis '{axis}'") from None
        return cls(bits)


Axes.X = Axes(1)
Axes.Y = Axes(2)
Axes.Z = Axes(4)