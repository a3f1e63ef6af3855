"""A tagged value that can hold any of the supported property types."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, NamedTuple

from robloxtypes.axes import Axes
from robloxtypes.basic_types import (
    CFrame,
    Color3,
    Color3uint8,
    ColorSequence,
    Enum,
    NumberRange,
    NumberSequence,
    Ray,
    Rect,
    Region3,
    Region3int16,
    UDim,
    UDim2,
    Vector2,
    Vector2int16,
    Vector3,
    Vector3int16,
)
from robloxtypes.binary_string import BinaryString
from robloxtypes.brick_color import BrickColor
from robloxtypes.content import Content
from robloxtypes.faces import Faces
from robloxtypes.physical_properties import (
    CustomPhysicalProperties,
    DefaultPhysicalProperties,
    physical_properties_from_json,
    physical_properties_to_json,
)
from robloxtypes.referent import Ref
from robloxtypes.shared_string import SharedString


class VariantType(enum.Enum):
    """Every type a Variant can hold.

    Members are declared in a fixed order; new types are only ever appended.
    The value of each member is the tag used in the JSON form.
    """

    AXES = "Axes"
    BINARY_STRING = "BinaryString"
    BOOL = "Bool"
    BRICK_COLOR = "BrickColor"
    CFRAME = "CFrame"
    COLOR3 = "Color3"
    COLOR3UINT8 = "Color3uint8"
    COLOR_SEQUENCE = "ColorSequence"
    CONTENT = "Content"
    ENUM = "Enum"
    FACES = "Faces"
    FLOAT32 = "Float32"
    FLOAT64 = "Float64"
    INT32 = "Int32"
    INT64 = "Int64"
    NUMBER_RANGE = "NumberRange"
    NUMBER_SEQUENCE = "NumberSequence"
    PHYSICAL_PROPERTIES = "PhysicalProperties"
    RAY = "Ray"
    RECT = "Rect"
    REF = "Ref"
    REGION3 = "Region3"
    REGION3INT16 = "Region3int16"
    SHARED_STRING = "SharedString"
    STRING = "String"
    UDIM = "UDim"
    UDIM2 = "UDim2"
    VECTOR2 = "Vector2"
    VECTOR2INT16 = "Vector2int16"
    VECTOR3 = "Vector3"
    VECTOR3INT16 = "Vector3int16"
    OPTIONAL_CFRAME = "OptionalCFrame"

    @property
    def index(self) -> int:
        """The position of this type in declaration order."""
        return list(VariantType).index(self)


class _Codec(NamedTuple):
    check: Callable[[Any], Any]
    to_json: Callable[[Any], Any]
    from_json: Callable[[Any], Any]


def _instance_of(*classes: type) -> Callable[[Any], Any]:
    names = " or ".join(cls.__name__ for cls in classes)

    def check(value: Any) -> Any:
        if not isinstance(value, classes):
            raise TypeError(f"expected {names}, not {type(value).__name__}")
        return value

    return check


def _typed(cls: type) -> _Codec:
    return _Codec(_instance_of(cls), lambda value: value.to_json(), cls.from_json)


def _check_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"expected bool, not {type(value).__name__}")
    return value


def _check_float(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected a number, not {type(value).__name__}")
    return float(value)


def _int_checker(bits: int) -> Callable[[Any], int]:
    low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1

    def check(value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"expected an int, not {type(value).__name__}")
        if not low <= value <= high:
            raise ValueError(f"{value} does not fit in i{bits}")
        return value

    return check


def _check_str(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected str, not {type(value).__name__}")
    return value


def _check_optional_cframe(value: Any) -> CFrame | None:
    if value is not None and not isinstance(value, CFrame):
        raise TypeError(f"expected CFrame or None, not {type(value).__name__}")
    return value


def _shared_string_to_json(value: Any) -> Any:
    raise ValueError("SharedString cannot be serialized as part of a Variant")


def _shared_string_from_json(data: Any) -> Any:
    raise ValueError("SharedString cannot be deserialized as part of a Variant")


_CODECS: dict[VariantType, _Codec] = {
    VariantType.AXES: _typed(Axes),
    VariantType.BINARY_STRING: _typed(BinaryString),
    VariantType.BOOL: _Codec(_check_bool, lambda value: value, _check_bool),
    VariantType.BRICK_COLOR: _typed(BrickColor),
    VariantType.CFRAME: _typed(CFrame),
    VariantType.COLOR3: _typed(Color3),
    VariantType.COLOR3UINT8: _typed(Color3uint8),
    VariantType.COLOR_SEQUENCE: _typed(ColorSequence),
    VariantType.CONTENT: _typed(Content),
    VariantType.ENUM: _typed(Enum),
    VariantType.FACES: _typed(Faces),
    VariantType.FLOAT32: _Codec(_check_float, lambda value: value, _check_float),
    VariantType.FLOAT64: _Codec(_check_float, lambda value: value, _check_float),
    VariantType.INT32: _Codec(_int_checker(32), lambda value: value, _int_checker(32)),
    VariantType.INT64: _Codec(_int_checker(64), lambda value: value, _int_checker(64)),
    VariantType.NUMBER_RANGE: _typed(NumberRange),
    VariantType.NUMBER_SEQUENCE: _typed(NumberSequence),
    VariantType.PHYSICAL_PROPERTIES: _Codec(
        _instance_of(DefaultPhysicalProperties, CustomPhysicalProperties),
        physical_properties_to_json,
        physical_properties_from_json,
    ),
    VariantType.RAY: _typed(Ray),
    VariantType.RECT: _typed(Rect),
    VariantType.REF: _typed(Ref),
    VariantType.REGION3: _typed(Region3),
    VariantType.REGION3INT16: _typed(Region3int16),
    VariantType.SHARED_STRING: _Codec(
        _instance_of(SharedString), _shared_string_to_json, _shared_string_from_json
    ),
    VariantType.STRING: _Codec(_check_str, lambda value: value, _check_str),
    VariantType.UDIM: _typed(UDim),
    VariantType.UDIM2: _typed(UDim2),
    VariantType.VECTOR2: _typed(Vector2),
    VariantType.VECTOR2INT16: _typed(Vector2int16),
    VariantType.VECTOR3: _typed(Vector3),
    VariantType.VECTOR3INT16: _typed(Vector3int16),
    VariantType.OPTIONAL_CFRAME: _Codec(
        _check_optional_cframe,
        lambda value: None if value is None else value.to_json(),
        lambda data: None if data is None else CFrame.from_json(data),
    ),
}

_BY_CLASS: dict[type, VariantType] = {
    Axes: VariantType.AXES,
    BinaryString: VariantType.BINARY_STRING,
    BrickColor: VariantType.BRICK_COLOR,
    CFrame: VariantType.CFRAME,
    Color3: VariantType.COLOR3,
    Color3uint8: VariantType.COLOR3UINT8,
    ColorSequence: VariantType.COLOR_SEQUENCE,
    Content: VariantType.CONTENT,
    Enum: VariantType.ENUM,
    Faces: VariantType.FACES,
    NumberRange: VariantType.NUMBER_RANGE,
    NumberSequence: VariantType.NUMBER_SEQUENCE,
    DefaultPhysicalProperties: VariantType.PHYSICAL_PROPERTIES,
    CustomPhysicalProperties: VariantType.PHYSICAL_PROPERTIES,
    Ray: VariantType.RAY,
    Rect: VariantType.RECT,
    Ref: VariantType.REF,
    Region3: VariantType.REGION3,
    Region3int16: VariantType.REGION3INT16,
    SharedString: VariantType.SHARED_STRING,
    UDim: VariantType.UDIM,
    UDim2: VariantType.UDIM2,
    Vector2: VariantType.VECTOR2,
    Vector2int16: VariantType.VECTOR2INT16,
    Vector3: VariantType.VECTOR3,
    Vector3int16: VariantType.VECTOR3INT16,
    bool: VariantType.BOOL,
    int: VariantType.INT64,
    float: VariantType.FLOAT64,
    str: VariantType.STRING,
    type(None): VariantType.OPTIONAL_CFRAME,
}


@dataclass(frozen=True)
class Variant:
    """A value of any supported type, tagged with its VariantType."""

    variant_type: VariantType
    value: Any

    def __post_init__(self) -> None:
        if not isinstance(self.variant_type, VariantType):
            raise TypeError("variant_type must be a VariantType")
        checked = _CODECS[self.variant_type].check(self.value)
        object.__setattr__(self, "value", checked)

    def ty(self) -> VariantType:
        """Return the type of the held value."""
        return self.variant_type

    @classmethod
    def from_value(cls, value: Any) -> Variant:
        """Wrap a plain value, choosing its type from its Python class.

        ``int`` becomes Int64, ``float`` becomes Float64, ``str`` becomes
        String and ``None`` becomes an empty OptionalCFrame.
        """
        if isinstance(value, Variant):
            return value
        try:
            variant_type = _BY_CLASS[type(value)]
        except KeyError:
            raise TypeError(f"cannot make a Variant from {type(value).__name__}") from None
        return cls(variant_type, value)

    def to_json(self) -> dict[str, Any]:
        """Return the JSON form: an object with the type tag as its only key."""
        return {self.variant_type.value: _CODECS[self.variant_type].to_json(self.value)}

    @classmethod
    def from_json(cls, data: Any) -> Variant:
        """Build a variant from its single-key JSON object."""
        if not isinstance(data, dict):
            raise TypeError("expected an object holding one variant")
        if len(data) != 1:
            raise ValueError(f"expected exactly one variant tag, found {len(data)}")
        ((tag, payload),) = data.items()
        try:
            variant_type = VariantType(tag)
        except ValueError:
            raise ValueError(f"unknown variant `{tag}`") from None
        return cls(variant_type, _CODECS[variant_type].from_json(payload))