import json

import pytest

from robloxtypes.brick_color import BrickColor


def test_from_name():
    assert BrickColor.from_name("Pastel brown") is BrickColor.PASTEL_BROWN


def test_from_number():
    assert BrickColor.from_number(1030) is BrickColor.PASTEL_BROWN


def test_from_name_unknown():
    assert BrickColor.from_name("Not a color") is None


def test_from_number_unknown():
    assert BrickColor.from_number(4) is None
    assert BrickColor.from_number(70000) is None


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Lilac", BrickColor.LILAC2),
        ("Rust", BrickColor.RUST),
        ("Gold", BrickColor.GOLD),
        ("Deep orange", BrickColor.DEEP_ORANGE),
    ],
)
def test_name_collisions_pick_first(name, expected):
    assert BrickColor.from_name(name) is expected


def test_collided_colors_reachable_by_number():
    assert BrickColor.from_number(321) is BrickColor.LILAC
    assert BrickColor.from_number(345) is BrickColor.RUST2
    assert BrickColor.from_number(333) is BrickColor.GOLD2
    assert BrickColor.from_number(1017) is BrickColor.DEEP_ORANGE2


def test_display():
    assert str(BrickColor.from_number(6)) == "Light green (Mint)"
    assert str(BrickColor.from_number(333)) == "Gold"


def test_rgb():
    assert BrickColor.from_name("Medium stone grey").rgb == (163, 162, 165)
    assert BrickColor.from_number(1032).rgb == (255, 0, 191)


def test_human_ser():
    assert json.dumps(BrickColor.GOLD2.to_json()) == "333"


def test_human_de():
    assert BrickColor.from_json(json.loads("1021")) is BrickColor.CAMO


def test_round_trip():
    value = BrickColor.CORK
    assert BrickColor.from_json(json.loads(json.dumps(value.to_json()))) is value


def test_from_json_invalid_number():
    with pytest.raises(ValueError, match="not a valid BrickColor number"):
        BrickColor.from_json(4)


def test_from_json_out_of_range():
    with pytest.raises(ValueError):
        BrickColor.from_json(-1)


def test_from_json_wrong_type():
    with pytest.raises(TypeError):
        BrickColor.from_json("Camo")


def test_every_name_resolves_to_a_color_with_that_name():
    for color in BrickColor:
        found = BrickColor.from_name(color.label)
        assert found is not None and found.label == color.label
        assert found.value <= color.value