"""Courses: an id and a name per line of the courses file."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from .store import DataFiles, append_row, count_lines, read_rows

MIN_NAME_LENGTH = 3
MAX_NAME_LENGTH = 50


@dataclass(frozen=True)
class Course:
    """One course record."""

    id: int
    name: str


def iter_courses(files: DataFiles) -> Iterator[Course]:
    """Yield every course in file order."""
    for fields in read_rows(files.courses):
        if len(fields) < 2:
            raise ValueError(f"malformed course record: {fields!r}")
        yield Course(id=int(fields[0]), name=fields[1])


def course_exists(files: DataFiles, name: str) -> bool:
    """Tell whether a course with this name is already stored."""
    return any(course.name == name for course in iter_courses(files))


def is_valid_course_name(name: str) -> bool:
    """A name is 3 to 50 characters long and holds no comma."""
    return MIN_NAME_LENGTH <= len(name) <= MAX_NAME_LENGTH and "," not in name


def add_course(files: DataFiles, name: str) -> Course:
    """Store a new course with the next id and return it."""
    if not is_valid_course_name(name):
        raise ValueError(f"invalid course name: {name!r}")
    if course_exists(files, name):
        raise ValueError(f"course {name} already exists")
    course = Course(id=count_lines(files.courses) + 1, name=name)
    append_row(files.courses, [course.id, course.name])
    return course


def list_course_names(files: DataFiles) -> list[str]:
    """Return the names of all courses in file order."""
    return [course.name for course in iter_courses(files)]


def course_name_from_id(files: DataFiles, course_id: int) -> Optional[str]:
    """Return the name of the course with this id, or None."""
    for course in iter_courses(files):
        if course.id == course_id:
            return course.name
    return None


def course_has_classes(files: DataFiles, course_id: int) -> bool:
    """Tell whether at least one class belongs to the course."""
    for fields in read_rows(files.classes):
        if len(fields) < 2:
            raise ValueError(f"malformed class record: {fields!r}")
        if int(fields[1]) == course_id:
            return True
    return False