"""Tests for position ordering."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from codeloc.errors import InvalidPositionError, LocationError
from codeloc.lsp.position import U32_MAX, Position

coordinates = st.integers(min_value=0, max_value=1000)
positions = st.builds(Position, coordinates, coordinates)


def test_is_before_and_is_after() -> None:
    pos1 = Position(10, 5)
    pos2 = Position(10, 10)
    pos3 = Position(11, 0)

    assert pos1.is_before(pos2)
    assert pos1.is_before(pos3)
    assert pos2.is_before(pos3)
    assert not pos2.is_before(pos1)
    assert not pos3.is_before(pos1)
    assert not pos3.is_before(pos2)

    assert pos2.is_after(pos1)
    assert pos3.is_after(pos1)
    assert pos3.is_after(pos2)
    assert not pos1.is_after(pos2)
    assert not pos1.is_after(pos3)
    assert not pos2.is_after(pos3)


def test_ordering_consistent_over_sorted_positions() -> None:
    ordered = [Position(0, 0), Position(0, 5), Position(1, 0), Position(10, 20)]
    for i, pos_a in enumerate(ordered):
        for j, pos_b in enumerate(ordered):
            if i < j:
                assert pos_a.is_before(pos_b)
                assert pos_b.is_after(pos_a)
            elif i > j:
                assert pos_a.is_after(pos_b)
                assert pos_b.is_before(pos_a)
            else:
                assert not pos_a.is_before(pos_b)
                assert not pos_a.is_after(pos_b)


def test_equal_positions_are_neither_before_nor_after() -> None:
    assert Position(3, 4) == Position(3, 4)
    assert not Position(3, 4).is_before(Position(3, 4))
    assert not Position(3, 4).is_after(Position(3, 4))


def test_comparison_operators_follow_document_order() -> None:
    assert Position(1, 99) < Position(2, 0)
    assert Position(2, 0) > Position(1, 99)
    assert sorted([Position(2, 1), Position(0, 3), Position(2, 0)]) == [
        Position(0, 3),
        Position(2, 0),
        Position(2, 1),
    ]


def test_accepts_full_u32_range() -> None:
    position = Position(U32_MAX, 0)
    assert position.line == 4_294_967_295
    assert Position(0, 0).is_before(position)


@pytest.mark.parametrize(
    ("line", "character"),
    [(-1, 0), (0, -1), (U32_MAX + 1, 0), (0, U32_MAX + 1), (True, 0), (0, 1.5), ("1", 0)],
)
def test_rejects_values_outside_u32(line: object, character: object) -> None:
    with pytest.raises(InvalidPositionError) as excinfo:
        Position(line, character)  # type: ignore[arg-type]
    assert isinstance(excinfo.value, LocationError)
    assert excinfo.value.line == line
    assert excinfo.value.character == character
    assert str(excinfo.value).startswith(f"Invalid position: line={line}, character={character}, reason=")


def test_positions_are_hashable_and_frozen() -> None:
    position = Position(1, 2)
    assert {position, Position(1, 2)} == {position}
    with pytest.raises(AttributeError):
        position.line = 3  # type: ignore[misc]


@given(positions, positions)
def test_exactly_one_relation_holds(a: Position, b: Position) -> None:
    relations = [a.is_before(b), a.is_after(b), a == b]
    assert relations.count(True) == 1
    if a != b:
        assert a.is_before(b) == b.is_after(a)


@given(positions, positions, positions)
def test_ordering_is_transitive(a: Position, b: Position, c: Position) -> None:
    if a.is_before(b) and b.is_before(c):
        assert a.is_before(c)
    if a.is_after(b) and b.is_after(c):
        assert a.is_after(c)


@given(positions, positions)
def test_is_before_matches_less_than(a: Position, b: Position) -> None:
    assert a.is_before(b) == (a < b)
    assert a.is_after(b) == (a > b)
