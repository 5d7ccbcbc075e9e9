"""Polynomials kept as terms ordered by ascending power."""

from __future__ import annotations

import argparse
import bisect
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from operator import attrgetter
from typing import TextIO


@dataclass(frozen=True)
class Term:
    """One coefficient-power pair."""

    coeff: int
    power: int

    def __str__(self) -> str:
        return f"{self.coeff}X^{self.power}"


class Polynomial:
    """Terms sorted by power; a new term goes before existing terms of equal or higher power."""

    def __init__(self, terms: Iterable[Term] = ()) -> None:
        self._terms: list[Term] = []
        for term in terms:
            self.add_term(term.coeff, term.power)

    def add_term(self, coeff: int, power: int) -> None:
        """Insert a term in power order."""
        index = bisect.bisect_left(self._terms, power, key=attrgetter("power"))
        self._terms.insert(index, Term(coeff, power))

    def __iter__(self) -> Iterator[Term]:
        return iter(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __str__(self) -> str:
        return " + ".join(str(term) for term in self._terms)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._terms!r})"


def _integers(stream: TextIO) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            yield int(token)


def main(argv: list[str] | None = None) -> int:
    """Read a term count and coefficient/exponent pairs from standard input and print the polynomial."""
    argparse.ArgumentParser(
        description="Build a polynomial from terms read on standard input."
    ).parse_args(argv)
    numbers = _integers(sys.stdin)
    polynomial = Polynomial()
    try:
        print("Enter the elements to be inserted")
        count = next(numbers)
        for _ in range(count):
            print("Enter value of coefficient and exponent : ")
            coeff = next(numbers)
            power = next(numbers)
            polynomial.add_term(coeff, power)
    except StopIteration:
        print("unexpected end of input", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"invalid number: {error}", file=sys.stderr)
        return 1
    print(polynomial)
    return 0