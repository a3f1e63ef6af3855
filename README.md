# robloxtypes

Plain Python value types for the properties found on Roblox instances:
vectors, colors, CFrames, UI dimensions, sequences, BrickColors, face and
axis sets, instance references, binary and shared strings, physical
properties, and a `Variant` that can hold any of them.

The types are immutable dataclasses (BrickColor and VariantType are enums).
Constructors check their arguments: integer fields must fit their width
(for example `Vector2int16` takes signed 16-bit values, `Color3uint8`
unsigned 8-bit ones), and float fields accept any int or float.

Most types convert to and from a JSON-compatible structure through
`to_json()` and the `from_json()` class method, so values can be stored with
the standard `json` module.

## Installation

```
pip install robloxtypes
```

## Examples

```python
import json

from robloxtypes.basic_types import Vector2, Vector3, UDim, UDim2
from robloxtypes.axes import Axes
from robloxtypes.brick_color import BrickColor
from robloxtypes.referent import Ref
from robloxtypes.variant import Variant, VariantType

# Tuple-like types serialize as lists.
size = UDim2(UDim(0.0, 30), UDim(1.0, 60))
print(json.dumps(size.to_json()))          # [[0.0, 30], [1.0, 60]]

# Basis vectors map to normal ids (+X, +Y, +Z -> 0, 1, 2; -X, -Y, -Z -> 3, 4, 5).
print(Vector3(0.0, -1.0, 0.0).to_normal_id())  # 4

# Axis and face sets are lists of names; duplicates are accepted.
print(Axes.all().to_json())                # ['X', 'Y', 'Z']
print(Axes.from_json(["X", "X"]) == Axes.X)  # True

# BrickColors by name or by number; str() gives the display name.
print(BrickColor.from_name("Pastel brown"))  # Pastel brown
print(BrickColor.from_number(1030) is BrickColor.PASTEL_BROWN)  # True
print(BrickColor.GOLD2.to_json())          # 333

# References print as 32 hex digits.
print(Ref.none())                          # 00000000000000000000000000000000
ref = Ref.from_str("0000000000000000000000000000001e")
print(ref.is_some())                       # True

# A Variant wraps any of the above and remembers its type.
value = Variant.from_value(Vector2(5.0, 7.0))
print(value.ty() is VariantType.VECTOR2)   # True
print(json.dumps(value.to_json()))         # {"Vector2": [5.0, 7.0]}
print(Variant.from_json({"Vector2": [5.0, 7.0]}) == value)  # True
```

`Variant.from_value` picks the type from the Python class: `int` becomes
`INT64`, `float` becomes `FLOAT64`, `str` becomes `STRING` and `None` an
empty `OPTIONAL_CFRAME`. For the other widths, build the variant directly,
for example `Variant(VariantType.INT32, 5)`.

## Modules

- `robloxtypes.basic_types` — `Enum`, `Vector2`, `Vector2int16`, `Vector3`,
  `Vector3int16`, `CFrame`, `Matrix3`, `Color3`, `Color3uint8`, `Ray`,
  `Region3`, `Region3int16`, `Rect`, `UDim`, `UDim2`, `NumberRange`,
  `ColorSequence`, `ColorSequenceKeypoint`, `NumberSequence` and
  `NumberSequenceKeypoint`.
- `robloxtypes.axes`, `robloxtypes.faces` — `Axes` and `Faces`, bitmask sets
  of axes and cube faces, with `empty()`, `all()`, `from_bits()` and
  `contains()`.
- `robloxtypes.brick_color` — the `BrickColor` palette, each member with a
  `label` and an `rgb` tuple.
- `robloxtypes.binary_string` — `BinaryString`, raw bytes stored as base64
  in JSON.
- `robloxtypes.content` — `Content`, an asset reference held as a string.
- `robloxtypes.shared_string` — `SharedString`, byte strings deduplicated by
  a 32-byte content digest (`SharedStringHash`) while any holder is alive.
- `robloxtypes.physical_properties` — `DefaultPhysicalProperties`,
  `CustomPhysicalProperties`, and `physical_properties_to_json()` /
  `physical_properties_from_json()` for the `"Default"`-or-object form.
- `robloxtypes.referent` — `Ref`, a random or null 128-bit instance
  reference.
- `robloxtypes.variant` — `Variant` and `VariantType`.

## Errors

`from_json()` raises `TypeError` when the input has the wrong JSON shape
(for instance a string where a list is expected) and `ValueError` when the
shape is right but the content is not (an unknown axis name, a list of the
wrong length, an unknown BrickColor number, invalid base64). A `Variant`
holding a `SharedString` cannot be converted to or from JSON and raises
`ValueError`.

## What this package does not do

It only models property values. It does not read or write model or place
files in any format, has no instance tree, and installs no command-line
tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```