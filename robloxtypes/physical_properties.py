"""Physical properties of parts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

_FIELDS = (
    ("density", "density"),
    ("friction", "friction"),
    ("elasticity", "elasticity"),
    ("friction_weight", "frictionWeight"),
    ("elasticity_weight", "elasticityWeight"),
)


@dataclass(frozen=True)
class DefaultPhysicalProperties:
    """The default physical properties of a part's material."""

    def __repr__(self) -> str:
        return "DefaultPhysicalProperties"


@dataclass(frozen=True)
class CustomPhysicalProperties:
    """Custom physics properties given to a part."""

    density: float
    friction: float
    elasticity: float
    friction_weight: float
    elasticity_weight: float

    def __post_init__(self) -> None:
        for name, _ in _FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"{name} must be a number, not {type(value).__name__}")
            object.__setattr__(self, name, float(value))

    def to_json(self) -> dict[str, float]:
        """Return the JSON form: an object with camel-case keys."""
        return {key: getattr(self, name) for name, key in _FIELDS}

    @classmethod
    def from_json(cls, data: Any) -> CustomPhysicalProperties:
        """Build custom properties from their JSON object."""
        if not isinstance(data, dict):
            raise TypeError("expected an object for CustomPhysicalProperties")
        values = {}
        for name, key in _FIELDS:
            if key not in data:
                raise ValueError(f"missing field `{key}`")
            value = data[key]
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"field `{key}` must be a number")
            values[name] = value
        return cls(**values)


PhysicalProperties = Union[DefaultPhysicalProperties, CustomPhysicalProperties]


def physical_properties_to_json(value: PhysicalProperties) -> Any:
    """Return the JSON form: ``"Default"`` or the custom properties object."""
    if isinstance(value, DefaultPhysicalProperties):
        return "Default"
    if isinstance(value, CustomPhysicalProperties):
        return value.to_json()
    raise TypeError(f"not physical properties: {type(value).__name__}")


def physical_properties_from_json(data: Any) -> PhysicalProperties:
    """Read ``"Default"`` or a custom properties object."""
    if isinstance(data, str):
        if data == "Default":
            return DefaultPhysicalProperties()
        raise ValueError(
            f"invalid value: string {data!r}, expected the string \"Default\" "
            "or a CustomPhysicalProperties struct"
        )
    if isinstance(data, dict):
        return CustomPhysicalProperties.from_json(data)
    raise TypeError('expected the string "Default" or a CustomPhysicalProperties struct')