import pytest

from starterbox.grades import Student, averages, marks_verdict


@pytest.mark.parametrize("marks", [100, 90])
def test_pass(marks):
    assert marks_verdict(marks) == "pass"


@pytest.mark.parametrize("marks", [80, 70])
def test_fail(marks):
    assert marks_verdict(marks) == "fail"


@pytest.mark.parametrize("marks", [0, 55, 95, 101])
def test_invalid(marks):
    with pytest.raises(ValueError, match="invalid number"):
        marks_verdict(marks)


def test_average_truncates():
    assert Student("ann", 70, 81).average() == 75


def test_average_of_equal_marks():
    assert Student("bob", 64, 64).average() == 64


def test_averages_preserves_order():
    students = [Student("a", 10, 20), Student("b", 90, 90), Student("c", 0, 0)]
    assert averages(students) == [s.average() for s in students]
    assert averages([]) == []