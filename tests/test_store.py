from pathlib import Path

import pytest

from gradebook.store import (
    DataFiles,
    append_row,
    count_lines,
    data_files_in,
    delete_line,
    read_rows,
    split_fields,
)


def test_default_locations():
    files = DataFiles()
    assert files.courses == Path("../data/courses.txt")
    assert files.classes == Path("../data/classes.txt")
    assert files.students == Path("../data/students.txt")
    assert files.grades == Path("../data/grades.txt")


def test_data_files_in(tmp_path):
    files = data_files_in(tmp_path)
    assert files.courses == tmp_path / "courses.txt"
    assert files.classes == tmp_path / "classes.txt"
    assert files.students == tmp_path / "students.txt"
    assert files.grades == tmp_path / "grades.txt"


def test_split_fields_basic():
    assert split_fields("1,Math") == ["1", "Math"]


def test_split_fields_empty_line():
    assert split_fields("") == []


def test_split_fields_keeps_middle_empty_and_drops_trailing():
    assert split_fields("a,,b") == ["a", "", "b"]
    assert split_fields("a,b,") == ["a", "b"]


def test_read_rows_missing_file(tmp_path):
    assert list(read_rows(tmp_path / "none.txt")) == []


def test_count_lines_missing_file(tmp_path):
    assert count_lines(tmp_path / "none.txt") == 0


def test_count_lines_without_trailing_newline(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("a\nb", encoding="utf-8")
    assert count_lines(path) == 2
    assert list(read_rows(path)) == [["a"], ["b"]]


def test_append_and_read_round_trip(tmp_path):
    path = tmp_path / "data.txt"
    append_row(path, [1, "Math"])
    append_row(path, [2, "Physics"])
    assert list(read_rows(path)) == [["1", "Math"], ["2", "Physics"]]
    assert count_lines(path) == 2
    assert path.read_text(encoding="utf-8") == "1,Math\n2,Physics\n"


def test_append_rejects_comma(tmp_path):
    path = tmp_path / "data.txt"
    with pytest.raises(ValueError):
        append_row(path, ["a,b"])
    assert count_lines(path) == 0


def test_append_to_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        append_row(tmp_path / "missing" / "data.txt", ["x"])


def test_delete_line_removes_requested_line(tmp_path):
    path = tmp_path / "data.txt"
    for row in (["a"], ["b"], ["c"]):
        append_row(path, row)
    assert delete_line(path, 2) == "b"
    assert list(read_rows(path)) == [["a"], ["c"]]


@pytest.mark.parametrize("number", [0, 4, -1])
def test_delete_line_out_of_range(tmp_path, number):
    path = tmp_path / "data.txt"
    for row in (["a"], ["b"], ["c"]):
        append_row(path, row)
    with pytest.raises(IndexError):
        delete_line(path, number)
    assert count_lines(path) == 3


def test_delete_line_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        delete_line(tmp_path / "none.txt", 1)