import pytest

from enumcases import Option


def test_iteration():
    assert list(Option[int].NONE) == []
    assert list(Option[int].Some(1)) == [1]


def test_methods():
    assert Option.Some(1).unwrap() == 1
    assert Option.Some(1).is_some()
    assert Option.NONE.is_none()
    assert Option.NONE.unwrap_or(5) == 5
    assert Option.Some(1).unwrap_or(5) == 1

    with pytest.raises(RuntimeError):
        Option.NONE.unwrap()


def test_match():
    def describe(o: Option[int]) -> str:
        match o:
            case Option.NONE:
                return "nothing"
            case Option.Some(val):
                return f"some {val}"

    assert describe(Option.NONE) == "nothing"
    assert describe(Option.Some(3)) == "some 3"


def test_lookup_by_raw_value():
    assert Option(None) is Option.NONE
