"""Adding sandpiles and toppling them until every cell holds at most three grains."""

from __future__ import annotations

from collections.abc import Callable

Grid = list[list[int]]

_NEIGHBOURS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def format_grid(grid: Grid) -> str:
    """Render a grid as space separated rows, each ending in a newline."""
    return "".join(" ".join(str(cell) for cell in row) + "\n" for row in grid)


def unstable_cells(grid: Grid) -> list[tuple[int, int]]:
    """Return the positions of cells holding more than three grains."""
    return [
        (i, j)
        for i, row in enumerate(grid)
        for j, cell in enumerate(row)
        if cell > 3
    ]


def topple(grid: Grid, i: int, j: int) -> None:
    """Move four grains from cell ``(i, j)`` to its neighbours, in place.

    Grains sent past the edge of the grid are lost.
    """
    grid[i][j] -= 4
    for di, dj in _NEIGHBOURS:
        ni, nj = i + di, j + dj
        if 0 <= ni < len(grid) and 0 <= nj < len(grid[ni]):
            grid[ni][nj] += 1


def sandpiles_sum(
    grid1: Grid, grid2: Grid, report: Callable[[Grid], None] | None = None
) -> Grid:
    """Return the stable sum of two sandpiles of the same shape.

    Before each toppling round a copy of the unstable grid is passed to
    ``report``. Every cell found unstable at the start of a round topples once.
    """
    if len(grid1) != len(grid2) or any(
        len(row1) != len(row2) for row1, row2 in zip(grid1, grid2)
    ):
        raise ValueError("grids must have the same shape")

    total = [[a + b for a, b in zip(row1, row2)] for row1, row2 in zip(grid1, grid2)]
    while cells := unstable_cells(total):
        if report is not None:
            report([row[:] for row in total])
        for i, j in cells:
            topple(total, i, j)
    return total