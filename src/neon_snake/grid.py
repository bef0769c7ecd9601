# grid.py
from typing import Tuple

Cell = Tuple[int, int]
Direction = Tuple[int, int]


def in_bounds(cell: Cell, grid_size: int) -> bool:
    """Check if a cell is inside the square grid."""
    x, y = cell
    return 0 <= x < grid_size and 0 <= y < grid_size


def equals(a: Cell, b: Cell) -> bool:
    return a[0] == b[0] and a[1] == b[1]


def add(cell: Cell, direction: Direction) -> Cell:
    """Move a cell one step along a direction."""
    return (cell[0] + direction[0], cell[1] + direction[1])


def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


def center(grid_size: int) -> Cell:
    return (grid_size // 2, grid_size // 2)
