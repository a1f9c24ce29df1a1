"""Saddle points of a matrix."""

from collections.abc import Sequence


def find_saddle_points(matrix: Sequence[Sequence[int]]) -> list[tuple[int, int]]:
    """Return (row, column) of every value that is the largest in its row and the smallest in its column."""
    width = len(matrix[0])
    column_minima = [min(row[j] for row in matrix) for j in range(width)]
    points = []
    for i, row in enumerate(matrix):
        row_max = max(row, default=None)
        for j, value in enumerate(row[:width]):
            if value >= row_max and value <= column_minima[j]:
                points.append((i, j))
    return points