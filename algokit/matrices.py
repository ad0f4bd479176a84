"""Operations on rectangular grids stored as lists of rows."""

from __future__ import annotations

from typing import Iterable, MutableSequence, Sequence

_MOVES = {
    "UP": (-1, 0),
    "RIGHT": (0, 1),
    "DOWN": (1, 0),
}
_DEFAULT_MOVE = (0, -1)


def rotate_image(matrix: MutableSequence[MutableSequence[int]]) -> None:
    """Rotate a square matrix 90 degrees clockwise, in place."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    rotated = [list(column) for column in zip(*reversed(matrix))]
    for row, new_values in zip(matrix, rotated):
        row[:] = new_values


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Values read clockwise from the top-left corner, spiralling inwards."""
    order: list[int] = []
    rows = [list(row) for row in matrix]
    while rows:
        order.extend(rows.pop(0))
        rows = [list(column) for column in zip(*rows)][::-1]
    return order


def transpose(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """The matrix with rows and columns exchanged."""
    return [list(column) for column in zip(*matrix)]


def satisfies_conditions(grid: Sequence[Sequence[int]]) -> bool:
    """Whether each cell equals the one below it and differs from the one to its right."""
    vertical = all(upper == lower for above, below in zip(grid, grid[1:])
                   for upper, lower in zip(above, below))
    horizontal = all(left != right for row in grid for left, right in zip(row, row[1:]))
    return vertical and horizontal


def final_snake_position(n: int, commands: Iterable[str]) -> int:
    """Cell index ``row * n + col`` reached by a snake starting at cell 0.

    Commands are "UP", "RIGHT" and "DOWN"; any other command moves left.
    """
    row = col = 0
    for command in commands:
        d_row, d_col = _MOVES.get(command, _DEFAULT_MOVE)
        row += d_row
        col += d_col
    return row * n + col