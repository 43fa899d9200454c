import pytest

from enumcases import Option
from enumcases.catalog import (
    Barcode,
    Beverage,
    CompassPoint,
    ControlCharacter,
    Direction,
    Planet,
    beverage_choices,
    describe,
)


def test_direction():
    direction = Direction.NORTH
    assert type(direction) is Direction
    assert type(direction).__name__ == "Direction"
    assert direction is not Direction.SOUTH
    assert len(Direction) == 4


def test_beverages():
    assert len(Beverage) == 3
    assert beverage_choices() == "3 beverages available"
    assert [b.value for b in Beverage] == ["coffee", "tea", "juice"]


def test_planet_raw_values():
    assert [p.value for p in Planet] == list(range(1, 9))
    assert Planet(3) is Planet.EARTH
    assert Planet.EARTH.value == 3
    with pytest.raises(ValueError):
        Planet(11)


def test_planet_lookup():
    assert Planet.lookup(7) == Option.Some(Planet.URANUS)
    assert Planet.lookup(11) is Option.NONE


def test_implicit_string_raw_values():
    assert CompassPoint.SOUTH.value == "south"
    assert CompassPoint("west") is CompassPoint.WEST


def test_control_characters():
    assert ControlCharacter("\n") is ControlCharacter.LINE_FEED
    assert ControlCharacter.lookup("\v").is_none()


def test_barcodes():
    upc = Barcode.Upc(8, 85909, 51226, 3)
    qr = Barcode.QrCode("ABCDEFGHIJKLMNOP")
    assert isinstance(upc, Barcode)
    assert describe(upc) == "UPC: 8, 85909, 51226, 3."
    assert describe(qr) == "QR code: ABCDEFGHIJKLMNOP."
    assert list(Barcode) == [Barcode.Upc, Barcode.QrCode]


def test_describe_rejects_other_types():
    with pytest.raises(TypeError):
        describe(Direction.NORTH)
