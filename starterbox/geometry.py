"""Whole-unit areas of plane and solid figures."""

_PI = 3.14


def parallelogram_area(base: int, height: int) -> int:
    """Return base times height."""
    return base * height


def trapezoid_area(height: int, long_base: int, short_base: int) -> int:
    """Return the trapezoid area, truncated to a whole number."""
    return int(0.5 * (long_base + short_base) * height)


def rhombus_area(base: int, side: int) -> int:
    """Return base times side."""
    return base * side


def ellipse_area(major_radius: int, minor_radius: int) -> int:
    """Return the ellipse area with pi taken as 3.14, truncated."""
    return int(_PI * major_radius * minor_radius)


def sphere_area(radius: int) -> int:
    """Return the sphere surface area with pi taken as 3.14, truncated."""
    return int(4 * _PI * radius * radius)