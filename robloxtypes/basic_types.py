"""Basic value types: vectors, colors, regions, UI dimensions and sequences."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

_F32_EPSILON = 2.0**-23


def _as_float(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be a number, not {type(value).__name__}")
    return float(value)


def _as_int(name: str, value: Any, bits: int, signed: bool) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    low, high = (-(1 << (bits - 1)), (1 << (bits - 1)) - 1) if signed else (0, (1 << bits) - 1)
    if not low <= value <= high:
        kind = f"{'i' if signed else 'u'}{bits}"
        raise ValueError(f"{name} {value} does not fit in {kind}")
    return value


def _set(obj: object, **values: Any) -> None:
    for key, value in values.items():
        object.__setattr__(obj, key, value)


def _json_float(data: Any) -> float:
    if isinstance(data, bool) or not isinstance(data, (int, float)):
        raise TypeError(f"expected a number, found {type(data).__name__}")
    return float(data)


def _json_int(data: Any) -> int:
    if isinstance(data, bool) or not isinstance(data, int):
        raise TypeError(f"expected an integer, found {type(data).__name__}")
    return data


def _items(data: Any, count: int, type_name: str) -> list[Any]:
    if isinstance(data, (str, bytes)) or not isinstance(data, (list, tuple)):
        raise TypeError(f"expected a list of {count} elements for {type_name}")
    if len(data) != count:
        raise ValueError(f"invalid length {len(data)} for {type_name}, expected {count}")
    return list(data)


def _field(data: Any, key: str, type_name: str) -> Any:
    if not isinstance(data, dict):
        raise TypeError(f"expected an object for {type_name}")
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field `{key}` in {type_name}") from None


@dataclass(frozen=True)
class Enum:
    """Any enum value; its meaning depends on where it is assigned."""

    value: int

    def __post_init__(self) -> None:
        _as_int("enum value", self.value, 32, signed=False)

    def __int__(self) -> int:
        return self.value

    def to_json(self) -> int:
        """Return the JSON form: the bare number."""
        return self.value

    @classmethod
    def from_json(cls, data: Any) -> Enum:
        """Build an enum value from a JSON number."""
        return cls(_json_int(data))


@dataclass(frozen=True)
class Vector2:
    """A 2D vector with float coordinates."""

    x: float
    y: float

    def __post_init__(self) -> None:
        _set(self, x=_as_float("x", self.x), y=_as_float("y", self.y))

    def to_json(self) -> list[float]:
        """Return the JSON form: ``[x, y]``."""
        return [self.x, self.y]

    @classmethod
    def from_json(cls, data: Any) -> Vector2:
        """Build a vector from ``[x, y]``."""
        x, y = _items(data, 2, "Vector2")
        return cls(_json_float(x), _json_float(y))


@dataclass(frozen=True)
class Vector2int16:
    """A 2D vector with signed 16-bit integer coordinates."""

    x: int
    y: int

    def __post_init__(self) -> None:
        _as_int("x", self.x, 16, signed=True)
        _as_int("y", self.y, 16, signed=True)

    def to_json(self) -> list[int]:
        """Return the JSON form: ``[x, y]``."""
        return [self.x, self.y]

    @classmethod
    def from_json(cls, data: Any) -> Vector2int16:
        """Build a vector from ``[x, y]``."""
        x, y = _items(data, 2, "Vector2int16")
        return cls(_json_int(x), _json_int(y))


def _approx_unit_or_zero(value: float) -> int | None:
    magnitude = abs(value)
    if magnitude <= _F32_EPSILON:
        return 0
    if magnitude - 1.0 <= _F32_EPSILON:
        return int(math.copysign(1.0, value))
    return None


@dataclass(frozen=True)
class Vector3:
    """A 3D vector with float coordinates."""

    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        _set(
            self,
            x=_as_float("x", self.x),
            y=_as_float("y", self.y),
            z=_as_float("z", self.z),
        )

    def to_normal_id(self) -> int | None:
        """Return the id of the basis vector this is, or None.

        +X, +Y, +Z map to 0, 1, 2 and -X, -Y, -Z map to 3, 4, 5.
        """
        x = _approx_unit_or_zero(self.x)
        y = _approx_unit_or_zero(self.y)
        z = _approx_unit_or_zero(self.z)
        if x is None or y is None or z is None:
            return None
        for position, (value, others) in enumerate(((x, (y, z)), (y, (x, z)), (z, (x, y)))):
            if others == (0, 0):
                if value == 1:
                    return position
                if value == -1:
                    return position + 3
                return None
        return None

    def to_json(self) -> list[float]:
        """Return the JSON form: ``[x, y, z]``."""
        return [self.x, self.y, self.z]

    @classmethod
    def from_json(cls, data: Any) -> Vector3:
        """Build a vector from ``[x, y, z]``."""
        x, y, z = _items(data, 3, "Vector3")
        return cls(_json_float(x), _json_float(y), _json_float(z))


@dataclass(frozen=True)
class Vector3int16:
    """A 3D vector with signed 16-bit integer coordinates."""

    x: int
    y: int
    z: int

    def __post_init__(self) -> None:
        for name in ("x", "y", "z"):
            _as_int(name, getattr(self, name), 16, signed=True)

    def to_json(self) -> list[int]:
        """Return the JSON form: ``[x, y, z]``."""
        return [self.x, self.y, self.z]

    @classmethod
    def from_json(cls, data: Any) -> Vector3int16:
        """Build a vector from ``[x, y, z]``."""
        x, y, z = _items(data, 3, "Vector3int16")
        return cls(_json_int(x), _json_int(y), _json_int(z))


@dataclass(frozen=True)
class Matrix3:
    """A 3x3 rotation matrix stored as three row vectors."""

    x: Vector3
    y: Vector3
    z: Vector3

    @classmethod
    def identity(cls) -> Matrix3:
        """Return the identity matrix."""
        return cls(
            Vector3(1.0, 0.0, 0.0),
            Vector3(0.0, 1.0, 0.0),
            Vector3(0.0, 0.0, 1.0),
        )

    def transpose(self) -> Matrix3:
        """Return the transposed matrix."""
        return Matrix3(
            Vector3(self.x.x, self.y.x, self.z.x),
            Vector3(self.x.y, self.y.y, self.z.y),
            Vector3(self.x.z, self.y.z, self.z.z),
        )

    def to_json(self) -> list[list[float]]:
        """Return the JSON form: a list of three rows."""
        return [self.x.to_json(), self.y.to_json(), self.z.to_json()]

    @classmethod
    def from_json(cls, data: Any) -> Matrix3:
        """Build a matrix from a list of three rows."""
        x, y, z = _items(data, 3, "Matrix3")
        return cls(Vector3.from_json(x), Vector3.from_json(y), Vector3.from_json(z))


@dataclass(frozen=True)
class CFrame:
    """A position and orientation in 3D space."""

    position: Vector3
    orientation: Matrix3

    def to_json(self) -> dict[str, Any]:
        """Return the JSON form: an object with position and orientation."""
        return {"position": self.position.to_json(), "orientation": self.orientation.to_json()}

    @classmethod
    def from_json(cls, data: Any) -> CFrame:
        """Build a frame from its JSON object."""
        return cls(
            Vector3.from_json(_field(data, "position", "CFrame")),
            Matrix3.from_json(_field(data, "orientation", "CFrame")),
        )


@dataclass(frozen=True)
class Color3:
    """A color whose channels may exceed 1 (HDR)."""

    r: float
    g: float
    b: float

    def __post_init__(self) -> None:
        _set(
            self,
            r=_as_float("r", self.r),
            g=_as_float("g", self.g),
            b=_as_float("b", self.b),
        )

    def to_json(self) -> list[float]:
        """Return the JSON form: ``[r, g, b]``."""
        return [self.r, self.g, self.b]

    @classmethod
    def from_json(cls, data: Any) -> Color3:
        """Build a color from ``[r, g, b]``."""
        r, g, b = _items(data, 3, "Color3")
        return cls(_json_float(r), _json_float(g), _json_float(b))


@dataclass(frozen=True)
class Color3uint8:
    """A non-HDR color with 8-bit channels."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            _as_int(name, getattr(self, name), 8, signed=False)

    def to_json(self) -> list[int]:
        """Return the JSON form: ``[r, g, b]``."""
        return [self.r, self.g, self.b]

    @classmethod
    def from_json(cls, data: Any) -> Color3uint8:
        """Build a color from ``[r, g, b]``."""
        r, g, b = _items(data, 3, "Color3uint8")
        return cls(_json_int(r), _json_int(g), _json_int(b))


@dataclass(frozen=True)
class Ray:
    """A ray in 3D space; the direction need not be a unit vector."""

    origin: Vector3
    direction: Vector3

    def to_json(self) -> dict[str, Any]:
        """Return the JSON form: an object with origin and direction."""
        return {"origin": self.origin.to_json(), "direction": self.direction.to_json()}

    @classmethod
    def from_json(cls, data: Any) -> Ray:
        """Build a ray from its JSON object."""
        return cls(
            Vector3.from_json(_field(data, "origin", "Ray")),
            Vector3.from_json(_field(data, "direction", "Ray")),
        )


@dataclass(frozen=True)
class Region3:
    """A bounding box in 3D space."""

    min: Vector3
    max: Vector3

    def to_json(self) -> list[list[float]]:
        """Return the JSON form: ``[min, max]``."""
        return [self.min.to_json(), self.max.to_json()]

    @classmethod
    def from_json(cls, data: Any) -> Region3:
        """Build a region from ``[min, max]``."""
        low, high = _items(data, 2, "Region3")
        return cls(Vector3.from_json(low), Vector3.from_json(high))


@dataclass(frozen=True)
class Region3int16:
    """A bounding box in 3D space with 16-bit integer corners."""

    min: Vector3int16
    max: Vector3int16

    def to_json(self) -> list[list[int]]:
        """Return the JSON form: ``[min, max]``."""
        return [self.min.to_json(), self.max.to_json()]

    @classmethod
    def from_json(cls, data: Any) -> Region3int16:
        """Build a region from ``[min, max]``."""
        low, high = _items(data, 2, "Region3int16")
        return cls(Vector3int16.from_json(low), Vector3int16.from_json(high))


@dataclass(frozen=True)
class Rect:
    """A bounding rectangle in 2D space."""

    min: Vector2
    max: Vector2

    def to_json(self) -> list[list[float]]:
        """Return the JSON form: ``[min, max]``."""
        return [self.min.to_json(), self.max.to_json()]

    @classmethod
    def from_json(cls, data: Any) -> Rect:
        """Build a rectangle from ``[min, max]``."""
        low, high = _items(data, 2, "Rect")
        return cls(Vector2.from_json(low), Vector2.from_json(high))


@dataclass(frozen=True)
class UDim:
    """A UI dimension: a fraction of the container plus a pixel offset."""

    scale: float
    offset: int

    def __post_init__(self) -> None:
        _set(self, scale=_as_float("scale", self.scale))
        _as_int("offset", self.offset, 32, signed=True)

    def to_json(self) -> list[Any]:
        """Return the JSON form: ``[scale, offset]``."""
        return [self.scale, self.offset]

    @classmethod
    def from_json(cls, data: Any) -> UDim:
        """Build a dimension from ``[scale, offset]``."""
        scale, offset = _items(data, 2, "UDim")
        return cls(_json_float(scale), _json_int(offset))


@dataclass(frozen=True)
class UDim2:
    """A 2D UI dimension made of two UDim values."""

    x: UDim
    y: UDim

    def to_json(self) -> list[list[Any]]:
        """Return the JSON form: ``[x, y]``."""
        return [self.x.to_json(), self.y.to_json()]

    @classmethod
    def from_json(cls, data: Any) -> UDim2:
        """Build a dimension from ``[x, y]``."""
        x, y = _items(data, 2, "UDim2")
        return cls(UDim.from_json(x), UDim.from_json(y))


@dataclass(frozen=True)
class NumberRange:
    """A range between two numbers."""

    min: float
    max: float

    def __post_init__(self) -> None:
        _set(self, min=_as_float("min", self.min), max=_as_float("max", self.max))

    def to_json(self) -> list[float]:
        """Return the JSON form: ``[min, max]``."""
        return [self.min, self.max]

    @classmethod
    def from_json(cls, data: Any) -> NumberRange:
        """Build a range from ``[min, max]``."""
        low, high = _items(data, 2, "NumberRange")
        return cls(_json_float(low), _json_float(high))


@dataclass(frozen=True)
class ColorSequenceKeypoint:
    """A single color at a point in time of a ColorSequence."""

    time: float
    color: Color3

    def __post_init__(self) -> None:
        _set(self, time=_as_float("time", self.time))

    def to_json(self) -> dict[str, Any]:
        """Return the JSON form: an object with time and color."""
        return {"time": self.time, "color": self.color.to_json()}

    @classmethod
    def from_json(cls, data: Any) -> ColorSequenceKeypoint:
        """Build a keypoint from its JSON object."""
        return cls(
            _json_float(_field(data, "time", "ColorSequenceKeypoint")),
            Color3.from_json(_field(data, "color", "ColorSequenceKeypoint")),
        )


@dataclass(frozen=True)
class ColorSequence:
    """A series of colors that can be tweened through."""

    keypoints: tuple[ColorSequenceKeypoint, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _set(self, keypoints=tuple(self.keypoints))

    def to_json(self) -> dict[str, Any]:
        """Return the JSON form: an object holding the keypoint list."""
        return {"keypoints": [point.to_json() for point in self.keypoints]}

    @classmethod
    def from_json(cls, data: Any) -> ColorSequence:
        """Build a sequence from its JSON object."""
        points = _field(data, "keypoints", "ColorSequence")
        if not isinstance(points, list):
            raise TypeError("expected a list of keypoints")
        return cls(tuple(ColorSequenceKeypoint.from_json(point) for point in points))


@dataclass(frozen=True)
class NumberSequenceKeypoint:
    """A value, envelope and point in time of a NumberSequence."""

    time: float
    value: float
    envelope: float

    def __post_init__(self) -> None:
        _set(
            self,
            time=_as_float("time", self.time),
            value=_as_float("value", self.value),
            envelope=_as_float("envelope", self.envelope),
        )

    def to_json(self) -> dict[str, float]:
        """Return the JSON form: an object with time, value and envelope."""
        return {"time": self.time, "value": self.value, "envelope": self.envelope}

    @classmethod
    def from_json(cls, data: Any) -> NumberSequenceKeypoint:
        """Build a keypoint from its JSON object."""
        return cls(
            *(
                _json_float(_field(data, key, "NumberSequenceKeypoint"))
                for key in ("time", "value", "envelope")
            )
        )


@dataclass(frozen=True)
class NumberSequence:
    """A sequence of numbers on a timeline."""

    keypoints: tuple[NumberSequenceKeypoint, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        _set(self, keypoints=tuple(self.keypoints))

    def to_json(self) -> dict[str, Any]:
        """Return the JSON form: an object holding the keypoint list."""
        return {"keypoints": [point.to_json() for point in self.keypoints]}

    @classmethod
    def from_json(cls, data: Any) -> NumberSequence:
        """Build a sequence from its JSON object."""
        points = _field(data, "keypoints", "NumberSequence")
        if not isinstance(points, list):
            raise TypeError("expected a list of keypoints")
        return cls(tuple(NumberSequenceKeypoint.from_json(point) for point in points))