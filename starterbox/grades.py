"""Student marks: verdicts and averages."""

from collections.abc import Iterable
from dataclasses import dataclass

_VERDICTS = {100: "pass", 90: "pass", 80: "fail", 70: "fail"}


def marks_verdict(marks: int) -> str:
    """Return "pass" or "fail" for a recognised mark; raise ValueError otherwise."""
    try:
        return _VERDICTS[marks]
    except KeyError:
        raise ValueError("invalid number") from None


@dataclass(frozen=True)
class Student:
    """A student's name and marks in two subjects."""

    name: str
    ppl: int
    maths: int

    def average(self) -> int:
        """Return the whole-number average of the two marks, truncated toward zero."""
        total = self.ppl + self.maths
        half = abs(total) // 2
        return -half if total < 0 else half


def averages(students: Iterable[Student]) -> list[int]:
    """Return each student's average, in order."""
    return [student.average() for student in students]