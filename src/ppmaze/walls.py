# src/ppmaze/walls.py
# Removed-wall bookkeeping. A Wall is one spanning-tree edge: the boundary
# between two orthogonally adjacent cells that the renderer draws open.

from dataclasses import dataclass
from enum import Enum
from typing import List

from .grid import Cell

class WallKind(Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"

@dataclass(frozen=True)
class Wall:
    start: Cell
    target: Cell
    kind: WallKind

    def endpoints(self):
        return (self.start.row, self.start.col), (self.target.row, self.target.col)

def remove_wall(walls: List[Wall], start: Cell, target: Cell, size: int) -> Wall:
    """
    Record the opened wall between `start` (cell being expanded) and `target`.

    Labels are fixed: a row difference is VERTICAL, a column difference is
    HORIZONTAL. The renderer's rectangles depend on exactly this pairing.
    The endpoint with the smaller row/col is always stored as `start`.
    """
    if start.ind(size) == target.ind(size):
        raise AssertionError(f"cannot remove a wall between cell ({start.row}, {start.col}) and itself")
    row_diff = start.row - target.row
    col_diff = start.col - target.col
    if abs(row_diff) + abs(col_diff) != 1:
        raise ValueError(
            f"cells ({start.row}, {start.col}) and ({target.row}, {target.col}) are not adjacent"
        )

    kind = WallKind.VERTICAL if row_diff != 0 else WallKind.HORIZONTAL
    if row_diff > 0 or col_diff > 0:
        wall = Wall(start=target, target=start, kind=kind)
    else:
        wall = Wall(start=start, target=target, kind=kind)
    walls.append(wall)
    return wall
