"""Text-art patterns built from asterisks and spaces.

Each function returns the pattern as a string, one line per row, every line
ending in a newline.
"""

from collections.abc import Iterable


def _block(lines: Iterable[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def heart(size: int) -> str:
    """Return a heart: two lobes above a downward triangle."""

    def rows():
        for i in range(size // 2, size, 2):
            lead = len(range(1, size - i, 2))
            yield " " * lead + "*" * i + " " * (size - i) + "*" * i
        for i in range(size, 0, -1):
            yield " " * (size - i) + "*" * (2 * i - 1)

    return _block(rows())


def hollow_square(size: int) -> str:
    """Return a square outline of the given side."""

    def rows():
        for i in range(1, size + 1):
            if i in (1, size):
                yield "*" * size
            else:
                yield "".join("*" if j in (1, size) else " " for j in range(1, size + 1))

    return _block(rows())


def x_pattern(half: int) -> str:
    """Return an X whose arms are half cells long, on a 2*half-1 square."""
    m = 2 * half - 1
    return _block(
        "".join("*" if j in (i, m - i + 1) else " " for j in range(1, m + 1))
        for i in range(1, m + 1)
    )


def pyramid(rows: int) -> str:
    """Return a centred pyramid of spaced stars."""
    return _block("  " * (rows - i) + " *  " * i for i in range(1, rows + 1))


def rhombus(n: int) -> str:
    """Return a slanted rhombus of n rows of n stars."""
    return _block(" " * (n - i) + " *" * n for i in range(1, n + 1))


def butterfly(n: int) -> str:
    """Return a butterfly of solid wings."""

    def row(i: int) -> str:
        return "*" * i + " " * (2 * n - 2 * i) + "*" * i

    order = [*range(1, n + 1), *range(n, 0, -1)]
    return _block(row(i) for i in order)


def spaced_butterfly(n: int) -> str:
    """Return a butterfly drawn two characters per column."""
    width = 2 * n
    columns = range(1, width + 1)
    top = (
        "".join(
            ("*" if i >= j else " ") + ("*" if i > width - j else " ") for j in columns
        )
        for i in range(1, n + 1)
    )
    bottom = (
        "".join(
            ("*" if i <= n - j + 1 else " ") + ("*" if i + n <= j else " ")
            for j in columns
        )
        for i in range(1, n + 1)
    )
    return _block([*top, *bottom])


def inverted_half_pyramid(n: int) -> str:
    """Return rows of n, n-1, ..., 1 stars."""
    return _block("*" * i for i in range(n, 0, -1))


def number_half_pyramid(rows: int) -> str:
    """Return rows counting 1 up to the row number, each number followed by a space."""
    return _block(
        "".join(f"{j} " for j in range(1, i + 1)) for i in range(1, rows + 1)
    )