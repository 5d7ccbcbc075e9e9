"""Integer arithmetic exercises: calculator, sequences and digit tricks."""

import math
from collections.abc import Iterator


class UnknownOperatorError(ValueError):
    """Raised when a calculator operator is not one of + - * /."""


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def calculate(op: str, a: int, b: int) -> int:
    """Apply op to two integers; division truncates toward zero."""
    match op:
        case "+":
            return a + b
        case "-":
            return a - b
        case "*":
            return a * b
        case "/":
            if b == 0:
                raise ZeroDivisionError("division by zero")
            return _truncating_div(a, b)
    raise UnknownOperatorError(f"unknown operator: {op!r}")


def fibonacci(count: int) -> Iterator[int]:
    """Yield the first count Fibonacci numbers, starting at 0."""
    current, following = 0, 1
    for _ in range(count):
        yield current
        current, following = following, current + following


def fib(n: int) -> int:
    """Return the n-th Fibonacci number, with fib(0) == 0."""
    if n < 0:
        raise ValueError("n must be non-negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def fibonacci_sum(count: int) -> int:
    """Return the sum of the first count Fibonacci numbers."""
    return sum(fibonacci(count))


def factorial(n: int) -> int:
    """Return n!."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    return math.factorial(n)


def binomial(n: int, r: int) -> int:
    """Return the number of ways to choose r items from n."""
    if n < 0 or r < 0 or r > n:
        raise ValueError("require 0 <= r <= n")
    return math.comb(n, r)


def pascal_rows(n: int) -> list[list[int]]:
    """Return rows 1..n, row i holding C(i, 1) .. C(i, i)."""
    return [[math.comb(i, j) for j in range(1, i + 1)] for i in range(1, n + 1)]


def reverse_digits(n: int) -> int:
    """Return n with its decimal digits reversed; non-positive numbers give 0."""
    reverse = 0
    while n > 0:
        n, digit = divmod(n, 10)
        reverse = reverse * 10 + digit
    return reverse


def reverse_five_digits(n: int) -> int:
    """Reverse the last five decimal digits of n, padding with leading zeros."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return int(f"{n % 100000:05d}"[::-1])


def is_palindrome(n: int) -> bool:
    """Return True if n reads the same with its digits reversed."""
    return reverse_digits(n) == n


def armstrong_numbers(limit: int) -> Iterator[int]:
    """Yield numbers in 1..limit equal to the sum of the cubes of their digits."""
    for number in range(1, limit + 1):
        if sum(int(digit) ** 3 for digit in str(number)) == number:
            yield number


def multiplication_table(a: int) -> list[str]:
    """Return the ten lines of the multiplication table of a."""
    return [f"{a} * {i} = {a * i}" for i in range(1, 11)]