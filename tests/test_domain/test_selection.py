"""Tests for the bounded single-selection list."""

import pytest

from trassen_explorer.domain import SelectionList


def test_new_list_selects_first_item():
    selection = SelectionList(["a", "b", "c"])

    assert selection.selected == 0
    assert selection.selected_item() == "a"


def test_empty_list_has_no_selection():
    selection = SelectionList([])

    assert selection.selected is None
    assert selection.selected_item() is None

    selection.move_up()
    selection.move_down()
    assert selection.selected is None


def test_move_up_at_top_is_idempotent():
    selection = SelectionList(["a", "b"])

    selection.move_up()
    selection.move_up()

    assert selection.selected == 0


def test_move_down_at_bottom_is_idempotent():
    selection = SelectionList(["a", "b", "c"])

    for _ in range(5):
        selection.move_down()

    assert selection.selected == 2
    assert selection.selected_item() == "c"


@pytest.mark.parametrize("index", [1, 2, 3])
def test_up_then_down_returns_to_interior_index(index):
    selection = SelectionList(range(5))
    selection.select(index)

    selection.move_up()
    selection.move_down()

    assert selection.selected == index


@pytest.mark.parametrize("move", ["move_up", "move_down"])
def test_move_from_cleared_selection_lands_on_first_item(move):
    selection = SelectionList(["a", "b", "c"])
    selection.select(2)
    selection.clear()
    assert selection.selected is None

    getattr(selection, move)()

    assert selection.selected == 0


def test_select_clamps_into_range():
    selection = SelectionList(["a", "b", "c"])

    selection.select(10)
    assert selection.selected == 2
    selection.select(-3)
    assert selection.selected == 0


def test_items_are_a_snapshot():
    items = ["a", "b"]
    selection = SelectionList(items)
    items.append("c")

    assert len(selection) == 2
    assert list(selection) == ["a", "b"]
    assert selection[1] == "b"
