import json

import pytest

from robloxtypes.referent import Ref

U128_MAX = (1 << 128) - 1


def test_display():
    assert str(Ref.none()) == "00000000000000000000000000000000"
    assert str(Ref(30)) == "0000000000000000000000000000001e"
    assert str(Ref(U128_MAX)) == "ffffffffffffffffffffffffffffffff"


def test_from_str():
    assert Ref.from_str("00000000000000000000000000000000") == Ref.none()
    assert Ref.from_str("00000000300000e00f00000000000001") == Ref(
        14855284604576099720297971713
    )
    assert Ref.from_str("ffffffffffffffffffffffffffffffff") == Ref(U128_MAX)


def test_human_none():
    value = Ref.none()
    ser = json.dumps(value.to_json())
    assert ser == '"00000000000000000000000000000000"'
    assert Ref.from_json(json.loads(ser)) == value


def test_human():
    value = Ref.new()
    ser = json.dumps(value.to_json())
    assert Ref.from_json(json.loads(ser)) == value


def test_non_human():
    value = Ref.new()
    assert Ref(int(value)) == value


def test_new_is_some():
    value = Ref.new()
    assert value.is_some()
    assert not value.is_none()


def test_none_is_none():
    assert Ref.none().is_none()
    assert not Ref.none().is_some()
    assert not Ref.none()


@pytest.mark.parametrize("text", ["", "xyz", "0x1f", "-1", "1_0", " 1"])
def test_from_str_invalid(text):
    with pytest.raises(ValueError):
        Ref.from_str(text)


def test_from_str_overflow():
    with pytest.raises(ValueError):
        Ref.from_str("1" + "0" * 32)


def test_value_out_of_range():
    with pytest.raises(ValueError):
        Ref(U128_MAX + 1)
    with pytest.raises(ValueError):
        Ref(-1)