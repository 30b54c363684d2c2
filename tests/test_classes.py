import pytest

from gradebook.classes import (
    SchoolClass,
    add_class,
    class_exists,
    class_has_students,
    class_name_from_id,
    course_id_from_class_id,
    is_valid_class_name,
    iter_classes,
)
from gradebook.store import data_files_in


@pytest.fixture
def files(tmp_path):
    return data_files_in(tmp_path)


def test_iter_classes_missing_file_is_empty(files):
    assert list(iter_classes(files)) == []


def test_iter_classes_reads_records(files):
    files.classes.write_text("1,1,A\n2,1,B\n3,2,A\n", encoding="utf-8")
    assert list(iter_classes(files)) == [
        SchoolClass(id=1, course_id=1, name="A"),
        SchoolClass(id=2, course_id=1, name="B"),
        SchoolClass(id=3, course_id=2, name="A"),
    ]


def test_iter_classes_malformed_record(files):
    files.classes.write_text("1,1\n", encoding="utf-8")
    with pytest.raises(ValueError):
        list(iter_classes(files))


@pytest.mark.parametrize("name", ["A", "M", "Z"])
def test_valid_class_names(name):
    assert is_valid_class_name(name) is True


@pytest.mark.parametrize("name", ["", "a", "AB", "1", "[", "@", " "])
def test_invalid_class_names(name):
    assert is_valid_class_name(name) is False


def test_add_class_writes_line(files):
    created = add_class(files, 1, "A")
    assert created == SchoolClass(id=1, course_id=1, name="A")
    assert files.classes.read_text(encoding="utf-8") == "1,1,A\n"


def test_add_class_ids_increase(files):
    first = add_class(files, 1, "A")
    second = add_class(files, 2, "A")
    third = add_class(files, 1, "B")
    assert [first.id, second.id, third.id] == [1, 2, 3]
    assert list(iter_classes(files)) == [first, second, third]


def test_add_class_rejects_duplicate_in_same_course(files):
    add_class(files, 1, "A")
    with pytest.raises(ValueError):
        add_class(files, 1, "A")
    assert len(list(iter_classes(files))) == 1


def test_add_class_rejects_invalid_name(files):
    with pytest.raises(ValueError):
        add_class(files, 1, "ab")
    assert not files.classes.exists()


def test_class_exists(files):
    add_class(files, 1, "A")
    assert class_exists(files, 1, "A") is True
    assert class_exists(files, 2, "A") is False
    assert class_exists(files, 1, "B") is False


def test_class_exists_missing_file(files):
    assert class_exists(files, 1, "A") is False


def test_course_id_from_class_id(files):
    add_class(files, 3, "A")
    add_class(files, 5, "B")
    assert course_id_from_class_id(files, 1) == 3
    assert course_id_from_class_id(files, 2) == 5
    assert course_id_from_class_id(files, 9) is None


def test_class_name_from_id(files):
    add_class(files, 1, "C")
    add_class(files, 1, "D")
    assert class_name_from_id(files, 2) == "D"
    assert class_name_from_id(files, 1) == "C"
    assert class_name_from_id(files, 7) is None


def test_class_has_students(files):
    files.students.write_text(
        "1,2,S1234567,Anna\n2,2,S7654321,Luca\n", encoding="utf-8"
    )
    assert class_has_students(files, 2) is True
    assert class_has_students(files, 1) is False


def test_class_has_students_missing_file(files):
    assert class_has_students(files, 1) is False


def test_class_has_students_malformed(files):
    files.students.write_text("1\n", encoding="utf-8")
    with pytest.raises(ValueError):
        class_has_students(files, 1)