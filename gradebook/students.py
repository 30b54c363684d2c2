"""Students: one enrolment per line of the students file.

A student has two identifiers. The *student number* is the line number the
program assigns (1, 2, 3, ...). The *student id* is the university id, such
as ``S7706624``. One student id may be enrolled in several classes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from .store import DataFiles, append_row, count_lines, read_rows

STUDENT_ID_LENGTH = 8
MAX_NAME_LENGTH = 20


@dataclass(frozen=True)
class Student:
    """One student record: number, class, university id and name."""

    number: int
    class_id: int
    student_id: str
    name: str


def iter_students(files: DataFiles) -> Iterator[Student]:
    """Yield every student record in file order; a missing file yields nothing."""
    for fields in read_rows(files.students):
        if len(fields) < 4:
            raise ValueError(f"malformed student record: {fields!r}")
        yield Student(
            number=int(fields[0]),
            class_id=int(fields[1]),
            student_id=fields[2],
            name=fields[3],
        )


def student_exists(files: DataFiles, class_id: int, student_id: str) -> bool:
    """Tell whether the student id is already enrolled in the class."""
    return any(
        student.class_id == class_id and student.student_id == student_id
        for student in iter_students(files)
    )


def is_valid_student_id(student_id: str) -> bool:
    """An id is ``S`` or ``s`` followed by seven digits."""
    if len(student_id) != STUDENT_ID_LENGTH or student_id[0] not in "sS":
        return False
    return all(char.isascii() and char.isdigit() for char in student_id[1:])


def is_valid_student_name(name: str, min_length: int = 1) -> bool:
    """A name holds ``min_length`` to 20 characters, only letters and spaces."""
    if not name or len(name) < min_length or len(name) > MAX_NAME_LENGTH:
        return False
    return all(
        char == " " or (char.isascii() and char.isalpha()) for char in name
    )


def add_student(
    files: DataFiles, class_id: int, student_id: str, name: str
) -> Student:
    """Enrol a student in a class with the next student number and return it."""
    if not is_valid_student_id(student_id):
        raise ValueError(f"invalid student id: {student_id!r}")
    if student_exists(files, class_id, student_id):
        raise ValueError(f"student {student_id} already exists in this class")
    if not is_valid_student_name(name):
        raise ValueError(f"invalid student name: {name!r}")
    student = Student(
        number=count_lines(files.students) + 1,
        class_id=class_id,
        student_id=student_id,
        name=name,
    )
    append_row(
        files.students,
        [student.number, student.class_id, student.student_id, student.name],
    )
    return student


def _find_by_number(files: DataFiles, student_number: int) -> Optional[Student]:
    for student in iter_students(files):
        if student.number == student_number:
            return student
    return None


def class_id_from_student_number(
    files: DataFiles, student_number: int
) -> Optional[int]:
    """Return the class id of the enrolment with this number, or None."""
    student = _find_by_number(files, student_number)
    return None if student is None else student.class_id


def student_id_from_number(files: DataFiles, student_number: int) -> Optional[str]:
    """Return the university id of the enrolment with this number, or None."""
    student = _find_by_number(files, student_number)
    return None if student is None else student.student_id


def student_number_from_id(files: DataFiles, student_id: str) -> Optional[int]:
    """Return the number of the first enrolment of this university id, or None."""
    for student in iter_students(files):
        if student.student_id == student_id:
            return student.number
    return None


def _grade_student_numbers(files: DataFiles) -> Iterator[int]:
    for fields in read_rows(files.grades):
        if len(fields) < 3:
            raise ValueError(f"malformed grade record: {fields!r}")
        yield int(fields[2])


def student_has_grades(files: DataFiles, student_number: int) -> bool:
    """Tell whether at least one grade is recorded for the student number."""
    return any(number == student_number for number in _grade_student_numbers(files))


def count_student_grades(files: DataFiles, student_id: str) -> int:
    """Count the grades recorded for the first enrolment of a university id."""
    student_number = student_number_from_id(files, student_id)
    if student_number is None:
        return 0
    return sum(
        1 for number in _grade_student_numbers(files) if number == student_number
    )