import pytest

from starterbox.arithmetic import (
    UnknownOperatorError,
    armstrong_numbers,
    binomial,
    calculate,
    factorial,
    fib,
    fibonacci,
    fibonacci_sum,
    is_palindrome,
    multiplication_table,
    pascal_rows,
    reverse_digits,
    reverse_five_digits,
)


@pytest.mark.parametrize("a,b", [(7, 3), (-4, 9), (0, 5)])
def test_calculate_basic_ops(a, b):
    assert calculate("+", a, b) == a + b
    assert calculate("-", a, b) == a - b
    assert calculate("*", a, b) == a * b


def test_calculate_division_truncates_toward_zero():
    assert calculate("/", -7, 2) == -3
    assert calculate("/", 7, 2) == -calculate("/", -7, 2)


def test_calculate_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        calculate("/", 1, 0)


def test_calculate_unknown_operator():
    with pytest.raises(UnknownOperatorError):
        calculate("%", 1, 2)


def test_fib_base_and_recurrence():
    assert fib(0) == 0
    assert fib(1) == 1
    for n in range(30):
        assert fib(n) + fib(n + 1) == fib(n + 2)


def test_fib_negative():
    with pytest.raises(ValueError):
        fib(-1)


def test_fibonacci_matches_fib():
    assert list(fibonacci(15)) == [fib(i) for i in range(15)]
    assert list(fibonacci(0)) == []


def test_fibonacci_sum():
    assert fibonacci_sum(12) == sum(fibonacci(12))
    # Sum of the first n terms is fib(n + 1) - 1.
    assert fibonacci_sum(12) == fib(13) - 1


def test_factorial():
    assert factorial(0) == 1
    assert factorial(1) == 1
    for n in range(2, 15):
        assert factorial(n) == n * factorial(n - 1)
    with pytest.raises(ValueError):
        factorial(-2)


def test_binomial_symmetry_and_edges():
    for n in range(10):
        assert binomial(n, 0) == 1
        assert binomial(n, n) == 1
        for r in range(n + 1):
            assert binomial(n, r) == binomial(n, n - r)
    with pytest.raises(ValueError):
        binomial(3, 5)


def test_pascal_rows_shape():
    rows = pascal_rows(6)
    assert len(rows) == 6
    for i, row in enumerate(rows, start=1):
        assert len(row) == i
        assert row[0] == i
        assert row[-1] == 1


def test_reverse_digits_round_trip():
    for n in [1, 12, 12345, 987654321]:
        assert reverse_digits(reverse_digits(n)) == n
    assert reverse_digits(0) == 0
    assert reverse_digits(-15) == 0


def test_reverse_five_digits():
    assert reverse_five_digits(12345) == int("12345"[::-1])
    assert reverse_five_digits(712345) == reverse_five_digits(12345)


def test_is_palindrome():
    assert is_palindrome(12321)
    assert not is_palindrome(123)
    assert not is_palindrome(-1)


def test_armstrong_numbers():
    found = list(armstrong_numbers(500))
    assert 153 in found
    assert all(1 <= n <= 500 for n in found)
    assert found == sorted(found)


def test_multiplication_table():
    lines = multiplication_table(6)
    assert len(lines) == 10
    assert lines[0] == "6 * 1 = 6"
    assert lines[-1].startswith("6 * 10 = ")