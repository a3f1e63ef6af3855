import json

import pytest

from robloxtypes.axes import Axes


def test_human_de():
    assert Axes.from_json(json.loads("[]")) == Axes.empty()
    assert Axes.from_json(json.loads('["X"]')) == Axes.X
    assert Axes.from_json(json.loads('["X", "Y", "Z"]')) == Axes.all()


def test_human_ser():
    compact = {"separators": (",", ":")}
    assert json.dumps(Axes.empty().to_json(), **compact) == "[]"
    assert json.dumps(Axes.X.to_json(), **compact) == '["X"]'
    assert json.dumps(Axes.all().to_json(), **compact) == '["X","Y","Z"]'


def test_human_duplicate():
    assert Axes.from_json(json.loads('["X", "X", "X", "X"]')) == Axes.X


def test_human_invalid():
    with pytest.raises(ValueError, match="pizza"):
        Axes.from_json(json.loads('["pizza"]'))


def test_human_not_a_list():
    with pytest.raises(TypeError):
        Axes.from_json("X")


@pytest.mark.parametrize("value", [Axes.empty(), Axes.X, Axes.all()])
def test_non_human(value):
    assert Axes.from_bits(value.bits) == value


def test_bits_values():
    assert Axes.X.bits == 1
    assert Axes.Y.bits == 2
    assert Axes.Z.bits == 4
    assert Axes.all().bits == 7
    assert Axes.empty().bits == 0


@pytest.mark.parametrize("bits", [8, 255, -1])
def test_from_bits_invalid(bits):
    with pytest.raises(ValueError):
        Axes.from_bits(bits)


def test_contains():
    xz = Axes.X | Axes.Z
    assert xz.contains(Axes.X)
    assert xz.contains(Axes.Z)
    assert not xz.contains(Axes.Y)
    assert Axes.all().contains(xz)
    assert xz.contains(Axes.empty())
    assert len(xz) == 2


def test_repr():
    assert repr(Axes.empty()) == "Axes()"
    assert repr(Axes.X | Axes.Y) == "Axes(X, Y)"