"""Grades: one mark out of thirty per line of the grades file.

Each line holds the course id, the class id, the student number and the
grade, in that order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, Optional

from .store import DataFiles, append_row, read_rows

MIN_GRADE = 0
MAX_GRADE = 30
NO_GRADES = "No grades."


@dataclass(frozen=True)
class Grade:
    """One grade record."""

    course_id: int
    class_id: int
    student_number: int
    value: int


def iter_grades(files: DataFiles) -> Iterator[Grade]:
    """Yield every grade in file order; a missing file yields nothing."""
    for fields in read_rows(files.grades):
        if len(fields) < 4:
            raise ValueError(f"malformed grade record: {fields!r}")
        yield Grade(
            course_id=int(fields[0]),
            class_id=int(fields[1]),
            student_number=int(fields[2]),
            value=int(fields[3]),
        )


def is_valid_grade(text: str) -> bool:
    """Tell whether any whitespace-separated word is a number from 0 to 30."""
    return any(
        word.isascii() and word.isdigit() and MIN_GRADE <= int(word) <= MAX_GRADE
        for word in text.split()
    )


def add_grade(
    files: DataFiles, course_id: int, class_id: int, student_number: int, value: int
) -> Grade:
    """Record a grade for a student and return it."""
    if not MIN_GRADE <= value <= MAX_GRADE:
        raise ValueError(f"grade must be between {MIN_GRADE} and {MAX_GRADE}: {value}")
    grade = Grade(
        course_id=course_id,
        class_id=class_id,
        student_number=student_number,
        value=value,
    )
    append_row(
        files.grades,
        [grade.course_id, grade.class_id, grade.student_number, grade.value],
    )
    return grade


def grades_for_student(files: DataFiles, student_number: int) -> list[Grade]:
    """Return the grades of a student number in file order."""
    return [grade for grade in iter_grades(files) if grade.student_number == student_number]


def _average(files: DataFiles, matches: Callable[[Grade], bool]) -> Optional[float]:
    values = [grade.value for grade in iter_grades(files) if matches(grade)]
    if not values:
        return None
    return sum(values) / len(values)


def course_average(files: DataFiles, course_id: int) -> Optional[float]:
    """Return the mean grade of a course, or None if it has no grades."""
    return _average(files, lambda grade: grade.course_id == course_id)


def class_average(files: DataFiles, class_id: int) -> Optional[float]:
    """Return the mean grade of a class, or None if it has no grades."""
    return _average(files, lambda grade: grade.class_id == class_id)


def student_average(files: DataFiles, student_number: int) -> Optional[float]:
    """Return the mean grade of a student number, or None if it has no grades."""
    return _average(files, lambda grade: grade.student_number == student_number)


def format_average(value: Optional[float]) -> str:
    """Show an average with two decimals, or ``No grades.`` when there is none."""
    if value is None:
        return NO_GRADES
    return f"{value:.2f}"