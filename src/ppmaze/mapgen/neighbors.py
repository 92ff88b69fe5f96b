# src/ppmaze/mapgen/neighbors.py
from enum import Enum
from typing import Tuple

from ..grid import Grid
from ..rng import RandomSource

class Direction(Enum):
    CENTER = 0  # no unvisited neighbor
    NORTH = 1
    SOUTH = 2
    WEST = 3
    EAST = 4

# (d_row, d_col)
DELTAS = {
    Direction.NORTH: (-1, 0),
    Direction.SOUTH: (1, 0),
    Direction.WEST: (0, -1),
    Direction.EAST: (0, 1),
}

def step(direction: Direction, row: int, col: int) -> Tuple[int, int]:
    if direction is Direction.CENTER:
        raise ValueError("CENTER has no neighbor to step to")
    dr, dc = DELTAS[direction]
    return row + dr, col + dc

def unvisited_neighbor(grid: Grid, row: int, col: int, rng: RandomSource) -> Direction:
    """
    Pick a random unvisited orthogonal neighbor of (row, col).

    The four directions are shuffled as a whole before checking, so every
    qualifying neighbor is equally likely. Returns Direction.CENTER when all
    neighbors are visited or off the grid.
    """
    directions = [Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST]
    rng.shuffle(directions)
    for d in directions:
        nr, nc = step(d, row, col)
        if grid.in_bounds(nr, nc) and not grid.get(nr, nc).visited:
            return d
    return Direction.CENTER
