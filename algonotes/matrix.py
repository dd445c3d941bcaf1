"""Problems on two-dimensional grids."""

from __future__ import annotations

from collections.abc import Iterator, MutableSequence, Sequence


def _ring(matrix: Sequence[Sequence[int]], layer: int, last_row: int, last_col: int) -> Iterator[int]:
    """Yield one full clockwise ring of ``matrix``, ``layer`` steps in from the edge."""
    top, bottom = layer, last_row - layer
    left, right = layer, last_col - layer
    yield from matrix[top][left:right]
    for row in range(top, bottom):
        yield matrix[row][right]
    for col in range(right, left, -1):
        yield matrix[bottom][col]
    for row in range(bottom, top, -1):
        yield matrix[row][left]


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the elements of a rectangular matrix in clockwise spiral order."""
    if not matrix:
        return []
    last_row = len(matrix) - 1
    last_col = len(matrix[0]) - 1
    result: list[int] = []
    layer, stop = 0, min(last_row, last_col)
    while layer < stop:
        result.extend(_ring(matrix, layer, last_row, last_col))
        layer += 1
        stop -= 1
    if layer == stop:
        # What remains in the middle is a single row or a single column.
        if last_row < last_col:
            result.extend(matrix[layer][layer:last_col - layer + 1])
        else:
            result.extend(row[layer] for row in matrix[layer:last_row - layer + 1])
    return result


def set_zeroes(matrix: Sequence[MutableSequence[int]]) -> None:
    """Zero, in place, every row and column that holds a zero."""
    zero_rows: set[int] = set()
    zero_cols: set[int] = set()
    for r, row in enumerate(matrix):
        for c, value in enumerate(row):
            if value == 0:
                zero_rows.add(r)
                zero_cols.add(c)
    for r, row in enumerate(matrix):
        for c in range(len(row)):
            if r in zero_rows or c in zero_cols:
                row[c] = 0