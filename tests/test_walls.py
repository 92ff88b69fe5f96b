import pytest

from ppmaze.grid import Cell
from ppmaze.walls import Wall, WallKind, remove_wall

def test_row_difference_is_vertical_and_ordered():
    walls = []
    # expanding from the lower cell to the one above it
    remove_wall(walls, Cell(3, 2), Cell(2, 2), 5)
    assert walls == [Wall(start=Cell(2, 2), target=Cell(3, 2), kind=WallKind.VERTICAL)]

def test_col_difference_is_horizontal_and_ordered():
    walls = []
    remove_wall(walls, Cell(1, 1), Cell(1, 2), 5)
    remove_wall(walls, Cell(4, 4), Cell(4, 3), 5)
    assert walls[0] == Wall(start=Cell(1, 1), target=Cell(1, 2), kind=WallKind.HORIZONTAL)
    assert walls[1] == Wall(start=Cell(4, 3), target=Cell(4, 4), kind=WallKind.HORIZONTAL)

def test_same_cell_is_an_invariant_violation():
    walls = []
    with pytest.raises(AssertionError):
        remove_wall(walls, Cell(1, 1), Cell(1, 1, True), 3)
    assert walls == []

def test_non_adjacent_cells_rejected():
    with pytest.raises(ValueError):
        remove_wall([], Cell(0, 0), Cell(1, 1), 3)
    with pytest.raises(ValueError):
        remove_wall([], Cell(0, 0), Cell(0, 2), 3)

def test_endpoints():
    w = remove_wall([], Cell(0, 1), Cell(0, 0), 2)
    assert w.endpoints() == ((0, 0), (0, 1))
