import json

import pytest

from robloxtypes.physical_properties import (
    CustomPhysicalProperties,
    DefaultPhysicalProperties,
    physical_properties_from_json,
    physical_properties_to_json,
)


def make_custom():
    return CustomPhysicalProperties(
        density=1.0,
        friction=0.5,
        elasticity=0.0,
        elasticity_weight=5.0,
        friction_weight=6.0,
    )


def test_json_default():
    default = DefaultPhysicalProperties()
    ser = json.dumps(physical_properties_to_json(default), separators=(",", ":"))
    assert ser == '"Default"'
    assert physical_properties_from_json(json.loads('"Default"')) == default


def test_json_custom():
    custom = make_custom()
    ser = json.dumps(physical_properties_to_json(custom), separators=(",", ":"))
    assert ser == (
        '{"density":1.0,"friction":0.5,"elasticity":0.0,'
        '"frictionWeight":6.0,"elasticityWeight":5.0}'
    )
    assert physical_properties_from_json(json.loads(ser)) == custom


def test_custom_round_trip_direct():
    custom = make_custom()
    assert CustomPhysicalProperties.from_json(custom.to_json()) == custom


def test_unknown_string_rejected():
    with pytest.raises(ValueError):
        physical_properties_from_json("Custom")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        physical_properties_from_json(3)


def test_missing_field_rejected():
    data = make_custom().to_json()
    del data["frictionWeight"]
    with pytest.raises(ValueError):
        physical_properties_from_json(data)


def test_default_and_custom_differ():
    assert physical_properties_to_json(DefaultPhysicalProperties()) == "Default"
    assert physical_properties_to_json(make_custom())["density"] == 1.0