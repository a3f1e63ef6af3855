import json

import pytest

from robloxtypes.binary_string import BinaryString


def test_human():
    data = BinaryString(b"hello")
    ser = json.dumps(data.to_json())
    assert ser == '"aGVsbG8="'
    assert BinaryString.from_json(json.loads(ser)) == data


def test_non_human():
    data = BinaryString(b"world")
    assert BinaryString(bytes(data)) == data
    assert bytes(data) == b"world"


def test_default_is_empty():
    assert bytes(BinaryString()) == b""
    assert len(BinaryString()) == 0
    assert BinaryString().to_json() == ""


def test_accepts_bytearray():
    value = BinaryString(bytearray(b"\x00\x01\x02"))
    assert value.data == b"\x00\x01\x02"
    assert len(value) == 3


def test_invalid_base64():
    with pytest.raises(ValueError):
        BinaryString.from_json("not base64!")


def test_from_json_rejects_non_string():
    with pytest.raises(TypeError):
        BinaryString.from_json(5)


def test_rejects_str_data():
    with pytest.raises(TypeError):
        BinaryString("hello")