"""Dense matrix operations on lists of rows."""

from collections.abc import Sequence

Matrix = list[list[int]]


def multiply(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Return the matrix product a x b."""
    if not a or not b:
        raise ValueError("matrices must not be empty")
    inner = len(b)
    if any(len(row) != inner for row in a):
        raise ValueError("column count of a must equal row count of b")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in a]


def transpose(a: Sequence[Sequence[int]]) -> Matrix:
    """Return the transpose of a."""
    if len({len(row) for row in a}) > 1:
        raise ValueError("rows must all have the same length")
    return [list(col) for col in zip(*a)]