"""Plain-text, comma-separated storage used by every part of the gradebook."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Union

PathLike = Union[str, "os.PathLike[str]"]

DELIMITER = ","

_DEFAULT_DIRECTORY = Path("../data")


@dataclass(frozen=True)
class DataFiles:
    """Locations of the four data files."""

    courses: Path = _DEFAULT_DIRECTORY / "courses.txt"
    classes: Path = _DEFAULT_DIRECTORY / "classes.txt"
    students: Path = _DEFAULT_DIRECTORY / "students.txt"
    grades: Path = _DEFAULT_DIRECTORY / "grades.txt"


def data_files_in(directory: PathLike) -> DataFiles:
    """Return the data file locations inside ``directory``."""
    base = Path(directory)
    return DataFiles(
        courses=base / "courses.txt",
        classes=base / "classes.txt",
        students=base / "students.txt",
        grades=base / "grades.txt",
    )


def split_fields(line: str) -> list[str]:
    """Split a line on commas.

    Empty fields in the middle are kept, a trailing empty field is dropped
    and an empty line has no fields at all.
    """
    if not line:
        return []
    fields = line.split(DELIMITER)
    if fields[-1] == "":
        fields.pop()
    return fields


def _read_lines(path: PathLike) -> list[str]:
    with open(path, encoding="utf-8", newline="") as handle:
        text = handle.read()
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def read_rows(path: PathLike) -> Iterator[list[str]]:
    """Yield the fields of every line; a missing file yields nothing."""
    try:
        lines = _read_lines(path)
    except FileNotFoundError:
        return
    for line in lines:
        yield split_fields(line)


def count_lines(path: PathLike) -> int:
    """Return the number of lines in a file, or 0 if it does not exist."""
    try:
        return len(_read_lines(path))
    except FileNotFoundError:
        return 0


def append_row(path: PathLike, fields: Iterable[object]) -> None:
    """Append one comma-separated line to a file, creating the file if needed."""
    texts = [str(field) for field in fields]
    for text in texts:
        if DELIMITER in text or "\n" in text:
            raise ValueError(f"field may not contain a comma or newline: {text!r}")
    with open(path, "a", encoding="utf-8", newline="") as handle:
        handle.write(DELIMITER.join(texts) + "\n")


def delete_line(path: PathLike, line_number: int) -> str:
    """Remove the 1-based ``line_number`` from a file and return its text."""
    lines = _read_lines(path)
    if line_number < 1 or line_number > len(lines):
        raise IndexError(f"invalid line number: {line_number}")
    removed = lines.pop(line_number - 1)
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.writelines(line + "\n" for line in lines)
    return removed