"""The enumerations shown by the playground tour."""
from __future__ import annotations

from dataclasses import dataclass

from ._adt import ADT, Visitor, auto


class Direction(ADT):
    NORTH = "north"
    SOUTH = "south"
    WEST = "west"
    EAST = "east"


class Planet(ADT):
    MERCURY = 1
    VENUS = auto()
    EARTH = auto()
    MARS = auto()
    JUPITER = auto()
    SATURN = auto()
    URANUS = auto()
    NEPTUNE = auto()


class Beverage(ADT):
    COFFEE = "coffee"
    TEA = "tea"
    JUICE = "juice"


def beverage_choices() -> str:
    return "%d beverages available" % len(Beverage)


class CompassPoint(ADT):
    """Raw values default to the lower-cased case name."""

    def _generate_next_value_(name, start, count, last_values):
        return name.lower()

    NORTH = auto()
    SOUTH = auto()
    EAST = auto()
    WEST = auto()


class ControlCharacter(ADT):
    TAB = "\t"
    LINE_FEED = "\n"
    CARRIAGE_RETURN = "\r"


class Barcode(ADT):
    @dataclass(frozen=True)
    class Upc:
        number_system: int
        manufacturer: int
        product: int
        check: int

    @dataclass(frozen=True)
    class QrCode:
        code: str


class _BarcodeDescriber(Visitor, adt=Barcode):
    def visit_upc(self, barcode: Barcode.Upc) -> str:
        return "UPC: %d, %d, %d, %d." % (
            barcode.number_system,
            barcode.manufacturer,
            barcode.product,
            barcode.check,
        )

    def visit_qr_code(self, barcode: Barcode.QrCode) -> str:
        return "QR code: %s." % barcode.code


def describe(barcode: Barcode) -> str:
    return _BarcodeDescriber().visit(barcode)
