import json

import pytest

from robloxtypes.axes import Axes
from robloxtypes.basic_types import (
    CFrame,
    Color3,
    Matrix3,
    NumberSequence,
    NumberSequenceKeypoint,
    Region3,
    UDim,
    UDim2,
    Vector2,
    Vector3,
)
from robloxtypes.binary_string import BinaryString
from robloxtypes.brick_color import BrickColor
from robloxtypes.faces import Faces
from robloxtypes.physical_properties import (
    CustomPhysicalProperties,
    DefaultPhysicalProperties,
)
from robloxtypes.referent import Ref
from robloxtypes.shared_string import SharedString
from robloxtypes.variant import Variant, VariantType


def _compact(value):
    return json.dumps(value, separators=(",", ":"))


def test_human():
    vec2 = Variant(VariantType.VECTOR2, Vector2(5.0, 7.0))
    ser = _compact(vec2.to_json())
    assert ser == '{"Vector2":[5.0,7.0]}'
    assert Variant.from_json(json.loads(ser)) == vec2


def test_round_trip_through_text():
    vec2 = Variant(VariantType.VECTOR2, Vector2(5.0, 7.0))
    text = json.dumps(vec2.to_json())
    assert Variant.from_json(json.loads(text)) == vec2


def test_type_order_is_stable():
    members = list(VariantType)
    assert len(members) == 32
    assert Variant.from_value(Axes.X).ty() is members[0]
    assert Variant.from_value(None).ty() is members[-1]
    shared = Variant.from_value(SharedString(b"order"))
    assert shared.ty().index == 23
    assert shared.ty() is members[23]


@pytest.mark.parametrize(
    "value, expected",
    [
        (Axes.X, VariantType.AXES),
        (BinaryString(b"hi"), VariantType.BINARY_STRING),
        (True, VariantType.BOOL),
        (BrickColor.CAMO, VariantType.BRICK_COLOR),
        (CFrame(Vector3(1, 2, 3), Matrix3.identity()), VariantType.CFRAME),
        (Color3(0.1, 0.2, 0.3), VariantType.COLOR3),
        (Faces.TOP, VariantType.FACES),
        (1.5, VariantType.FLOAT64),
        (7, VariantType.INT64),
        (DefaultPhysicalProperties(), VariantType.PHYSICAL_PROPERTIES),
        (Ref.none(), VariantType.REF),
        (SharedString(b"abc"), VariantType.SHARED_STRING),
        ("hello", VariantType.STRING),
        (UDim(1.0, 175), VariantType.UDIM),
        (Vector2(1, 2), VariantType.VECTOR2),
        (None, VariantType.OPTIONAL_CFRAME),
    ],
)
def test_from_value_picks_type(value, expected):
    variant = Variant.from_value(value)
    assert variant.ty() is expected
    assert variant.value == value


def test_from_value_rejects_unknown_class():
    with pytest.raises(TypeError):
        Variant.from_value(object())


def test_constructor_checks_value_type():
    with pytest.raises(TypeError):
        Variant(VariantType.VECTOR3, Vector2(1.0, 2.0))


def test_bool_is_not_int():
    with pytest.raises(TypeError):
        Variant(VariantType.INT32, True)


def test_int32_range():
    assert Variant(VariantType.INT32, 2**31 - 1).value == 2**31 - 1
    with pytest.raises(ValueError):
        Variant(VariantType.INT32, 2**31)


def test_float_normalized():
    variant = Variant(VariantType.FLOAT32, 2)
    assert variant.value == 2.0
    assert isinstance(variant.value, float)


@pytest.mark.parametrize(
    "variant, expected",
    [
        (Variant(VariantType.BOOL, False), {"Bool": False}),
        (Variant(VariantType.INT32, -4), {"Int32": -4}),
        (Variant(VariantType.STRING, "hi"), {"String": "hi"}),
        (Variant(VariantType.BRICK_COLOR, BrickColor.GOLD2), {"BrickColor": 333}),
        (Variant(VariantType.AXES, Axes.all()), {"Axes": ["X", "Y", "Z"]}),
        (
            Variant(VariantType.PHYSICAL_PROPERTIES, DefaultPhysicalProperties()),
            {"PhysicalProperties": "Default"},
        ),
        (Variant(VariantType.OPTIONAL_CFRAME, None), {"OptionalCFrame": None}),
        (
            Variant(VariantType.UDIM2, UDim2(UDim(0.0, 30), UDim(1.0, 60))),
            {"UDim2": [[0.0, 30], [1.0, 60]]},
        ),
    ],
)
def test_to_json_values(variant, expected):
    assert variant.to_json() == expected
    assert Variant.from_json(expected) == variant


@pytest.mark.parametrize(
    "variant",
    [
        Variant(VariantType.BINARY_STRING, BinaryString(b"world")),
        Variant(VariantType.CFRAME, CFrame(Vector3(1, 2, 3), Matrix3.identity())),
        Variant(
            VariantType.OPTIONAL_CFRAME,
            CFrame(Vector3(4, 5, 6), Matrix3.identity()),
        ),
        Variant(VariantType.REF, Ref.new()),
        Variant(VariantType.FACES, Faces.LEFT),
        Variant(
            VariantType.REGION3,
            Region3(Vector3(-1.0, -2.0, -3.0), Vector3(4.0, 5.0, 6.0)),
        ),
        Variant(
            VariantType.NUMBER_SEQUENCE,
            NumberSequence((NumberSequenceKeypoint(0.0, 1.0, 0.5),)),
        ),
        Variant(
            VariantType.PHYSICAL_PROPERTIES,
            CustomPhysicalProperties(1.0, 0.5, 0.0, 6.0, 5.0),
        ),
        Variant(VariantType.INT64, 2**40),
        Variant(VariantType.FLOAT64, 0.25),
    ],
)
def test_json_round_trip(variant):
    restored = Variant.from_json(json.loads(json.dumps(variant.to_json())))
    assert restored == variant
    assert restored.ty() is variant.ty()


def test_shared_string_cannot_serialize():
    variant = Variant.from_value(SharedString(b"shared"))
    with pytest.raises(ValueError, match="cannot be serialized"):
        variant.to_json()


def test_shared_string_cannot_deserialize():
    with pytest.raises(ValueError, match="cannot be deserialized"):
        Variant.from_json({"SharedString": "abc"})


def test_from_json_unknown_tag():
    with pytest.raises(ValueError, match="unknown variant"):
        Variant.from_json({"Pizza": 1})


def test_from_json_needs_one_key():
    with pytest.raises(ValueError):
        Variant.from_json({"Bool": True, "String": "x"})
    with pytest.raises(ValueError):
        Variant.from_json({})


def test_from_json_not_object():
    with pytest.raises(TypeError):
        Variant.from_json([1, 2])


def test_from_json_bad_payload():
    with pytest.raises(ValueError):
        Variant.from_json({"Vector2": [1.0]})


def test_from_value_passes_variant_through():
    variant = Variant(VariantType.FLOAT32, 1.0)
    assert Variant.from_value(variant) is variant