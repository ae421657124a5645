"""Rotation of a rectangular matrix by a quarter turn."""

from __future__ import annotations


def rotate_matrix_90_degrees(matrix: list[list[int]]) -> None:
    """Rotate ``matrix`` 90 degrees clockwise, replacing its contents in place.

    An ``n x m`` matrix becomes ``m x n``. An empty matrix is left as is.
    """
    if not matrix or not matrix[0]:
        return
    matrix[:] = [list(row) for row in zip(*reversed(matrix))]