import pytest

from ppmaze.grid import Cell, Grid

def test_empty_grid_positions_match_coordinates():
    g = Grid.empty(4)
    for r in range(4):
        for c in range(4):
            assert g.get(r, c) == Cell(r, c, False)
    assert g.visited_count() == 0

def test_size_must_be_positive():
    with pytest.raises(ValueError):
        Grid.empty(0)

def test_bounds_checked_access():
    g = Grid.empty(3)
    assert g.in_bounds(0, 0) and g.in_bounds(2, 2)
    assert not g.in_bounds(-1, 0) and not g.in_bounds(0, 3)
    with pytest.raises(IndexError):
        g.get(3, 0)
    with pytest.raises(IndexError):
        g.mark_visited(0, -1)

def test_mark_visited_replaces_cell_value():
    g = Grid.empty(2)
    before = g.get(1, 0)
    after = g.mark_visited(1, 0)
    assert after == Cell(1, 0, True)
    assert g.get(1, 0) is after
    assert before.visited is False  # old value untouched
    assert g.visited_count() == 1 and not g.all_visited()

def test_ind_is_row_major():
    assert Cell(2, 3).ind(10) == 23
