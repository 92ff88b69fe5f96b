# src/ppmaze/mapgen/backtrack.py
# Iterative recursive backtracker. An explicit list is the frontier stack, so
# large grids never hit the interpreter's recursion limit.

from dataclasses import dataclass, field
from typing import List

from ..grid import Cell, Grid
from ..rng import RandomSource
from ..walls import Wall, remove_wall
from .neighbors import Direction, step, unvisited_neighbor

@dataclass
class MazeEnv:
    grid: Grid
    removed_walls: List[Wall] = field(default_factory=list)

    @classmethod
    def init(cls, size: int) -> "MazeEnv":
        return cls(grid=Grid.empty(size))

    @property
    def size(self) -> int:
        return self.grid.size

def carve_maze(env: MazeEnv, rng: RandomSource) -> List[Wall]:
    """
    Carve a perfect maze into `env`, appending one Wall per tree edge.

    Every cell ends up visited and exactly size*size - 1 walls are recorded,
    since a wall is only removed when stepping into an unvisited cell.
    """
    grid = env.grid
    size = grid.size

    row = rng.randrange(size)
    col = rng.randrange(size)
    stack: List[Cell] = [grid.mark_visited(row, col)]

    while stack:
        current = stack.pop()
        unvisited = unvisited_neighbor(grid, current.row, current.col, rng)
        if unvisited is Direction.CENTER:
            # dead end: backtrack
            continue
        # keep current around for its remaining neighbors
        stack.append(current)

        target_row, target_col = step(unvisited, current.row, current.col)
        target = grid.get(target_row, target_col)
        remove_wall(env.removed_walls, current, target, size)
        stack.append(grid.mark_visited(target_row, target_col))

    return env.removed_walls
