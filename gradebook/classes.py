"""Classes: sections of a course, one letter each, one per line of the classes file."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from .store import DataFiles, append_row, count_lines, read_rows


@dataclass(frozen=True)
class SchoolClass:
    """One class record: its id, the course it belongs to and its letter."""

    id: int
    course_id: int
    name: str


def iter_classes(files: DataFiles) -> Iterator[SchoolClass]:
    """Yield every class in file order; a missing file yields nothing."""
    for fields in read_rows(files.classes):
        if len(fields) < 3:
            raise ValueError(f"malformed class record: {fields!r}")
        yield SchoolClass(id=int(fields[0]), course_id=int(fields[1]), name=fields[2])


def class_exists(files: DataFiles, course_id: int, name: str) -> bool:
    """Tell whether the course already has a class with this name."""
    return any(
        school_class.course_id == course_id and school_class.name == name
        for school_class in iter_classes(files)
    )


def is_valid_class_name(name: str) -> bool:
    """A class name is a single capital letter from A to Z."""
    return len(name) == 1 and "A" <= name <= "Z"


def add_class(files: DataFiles, course_id: int, name: str) -> SchoolClass:
    """Store a new class with the next id and return it."""
    if not is_valid_class_name(name):
        raise ValueError(f"invalid class name: {name!r}")
    if class_exists(files, course_id, name):
        raise ValueError(f"class {name} already exists in this course")
    school_class = SchoolClass(
        id=count_lines(files.classes) + 1, course_id=course_id, name=name
    )
    append_row(
        files.classes, [school_class.id, school_class.course_id, school_class.name]
    )
    return school_class


def course_id_from_class_id(files: DataFiles, class_id: int) -> Optional[int]:
    """Return the id of the course the class belongs to, or None."""
    for school_class in iter_classes(files):
        if school_class.id == class_id:
            return school_class.course_id
    return None


def class_name_from_id(files: DataFiles, class_id: int) -> Optional[str]:
    """Return the letter of the class with this id, or None."""
    for school_class in iter_classes(files):
        if school_class.id == class_id:
            return school_class.name
    return None


def class_has_students(files: DataFiles, class_id: int) -> bool:
    """Tell whether at least one student is enrolled in the class."""
    for fields in read_rows(files.students):
        if len(fields) < 2:
            raise ValueError(f"malformed student record: {fields!r}")
        if int(fields[1]) == class_id:
            return True
    return False