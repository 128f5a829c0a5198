import pytest

from xo.mark import Mark
from xo.square import ALL_SQUARES, CORNERS, EDGES, Square


def test_mark_inverse_and_invert_operator():
    assert Mark.X.inverse() is Mark.O
    assert Mark.O.inverse() is Mark.X
    m = Mark.X
    m = ~m
    assert m is Mark.O


@pytest.mark.parametrize("text,expected", [
    ("x", Mark.X), ("X", Mark.X), ("o", Mark.O), ("O", Mark.O),
    ("", None), ("0", None), ("xo", None), (".", None),
])
def test_mark_parse(text, expected):
    assert Mark.parse(text) is expected


def test_mark_emoji_roundtrip():
    for mark in Mark:
        assert Mark.from_emoji(mark.emoji) is mark
    assert Mark.from_emoji("\u2b1c") is None
    assert str(Mark.X) == "x"


def test_square_coordinates_row_major():
    for square in ALL_SQUARES:
        assert square == square.x + square.y * 3
        assert Square.from_xy(square.x, square.y) is square
    assert Square.from_xy(2, 0) is Square.CA
    assert Square.from_xy(0, 2) is Square.AC


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (3, 0), (0, 3), (3, 3)])
def test_square_out_of_range_gives_none(x, y):
    assert Square.from_xy(x, y) is None


def test_square_classification_is_exclusive_and_exhaustive():
    for square in ALL_SQUARES:
        kinds = [square.is_corner, square.is_center, square.is_edge]
        assert kinds.count(True) == 1
    assert [s for s in ALL_SQUARES if s.is_corner] == list(CORNERS)
    assert [s for s in ALL_SQUARES if s.is_edge] == list(EDGES)
    assert [s for s in ALL_SQUARES if s.is_center] == [Square.BB]


def test_square_collections_order():
    assert ALL_SQUARES == tuple(Square(i) for i in range(9))
    assert CORNERS == (Square.AA, Square.CA, Square.AC, Square.CC)
    assert EDGES == (Square.BA, Square.AB, Square.CB, Square.BC)


def test_square_names_and_parse():
    assert str(Square.BB) == "bb"
    assert str(Square.CA) == "ca"
    assert Square.parse("bb") is Square.BB
    assert Square.parse(" CA ") is Square.CA
    assert Square.parse("8") is Square.CC
    assert Square.parse("9") is None
    assert Square.parse("\u00b2") is None
    assert Square.parse("\u0664") is None
    assert Square.parse("dd") is None
    assert Square.parse("") is None
