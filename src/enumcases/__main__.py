"""A console tour of the package: `python -m enumcases [-v]`."""
import argparse
import logging

from ._adt import Option
from .catalog import Barcode, Beverage, Direction, Planet, beverage_choices, describe
from .config import EvaluationPolicy
from .expression import addition, evaluate, literal, multiplication, render


def tour(policy: EvaluationPolicy) -> None:
    direction = Direction.NORTH
    print(type(direction).__name__)

    print(beverage_choices())
    for beverage in Beverage:
        print(beverage.value)

    print(Planet(3))
    for raw in (7, 11):
        match Planet.lookup(raw):
            case Option.Some(planet):
                print("Planet %d is %s" % (raw, planet.name))
            case Option.NONE:
                print("There isn't a planet at position %d" % raw)

    for barcode in (Barcode.Upc(8, 85909, 51226, 3), Barcode.QrCode("ABCDEFGHIJKLMNOP")):
        print(describe(barcode))

    five = literal(5)
    four = literal(4)
    sum_ = addition(five, four)
    product = multiplication(sum_, literal(2))
    for expression in (five, sum_, product):
        print("%s = %d" % (render(expression), evaluate(expression, policy)))


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(prog="enumcases", description=__doc__)
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    tour(EvaluationPolicy.from_env())


if __name__ == "__main__":
    main()
