from dataclasses import dataclass, replace
from typing import List

@dataclass(frozen=True)
class Cell:
    row: int
    col: int
    visited: bool = False

    def ind(self, size: int) -> int:
        return self.row * size + self.col

@dataclass
class Grid:
    cells: List[List[Cell]]
    size: int

    @classmethod
    def empty(cls, size: int) -> "Grid":
        if size < 1:
            raise ValueError(f"grid size must be >= 1, got {size}")
        cells = [[Cell(r, c) for c in range(size)] for r in range(size)]
        return cls(cells=cells, size=size)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row: int, col: int) -> Cell:
        if not self.in_bounds(row, col):
            raise IndexError(f"cell ({row}, {col}) outside {self.size}x{self.size} grid")
        return self.cells[row][col]

    def mark_visited(self, row: int, col: int) -> Cell:
        # Cells are values; swap in a visited copy and hand it back.
        cell = replace(self.get(row, col), visited=True)
        self.cells[row][col] = cell
        return cell

    def visited_count(self) -> int:
        return sum(c.visited for row in self.cells for c in row)

    def all_visited(self) -> bool:
        return self.visited_count() == self.size * self.size
