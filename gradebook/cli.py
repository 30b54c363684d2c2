"""Interactive console for managing courses, classes, students and grades."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional, TextIO

from .classes import (
    add_class,
    class_exists,
    class_has_students,
    course_id_from_class_id,
    is_valid_class_name,
    iter_classes,
)
from .courses import (
    add_course,
    course_exists,
    course_has_classes,
    is_valid_course_name,
    iter_courses,
)
from .grades import (
    MAX_GRADE,
    MIN_GRADE,
    add_grade,
    class_average,
    course_average,
    grades_for_student,
    student_average,
)
from .store import DataFiles, count_lines, data_files_in
from .students import (
    add_student,
    class_id_from_student_number,
    is_valid_student_id,
    is_valid_student_name,
    iter_students,
    student_exists,
    student_has_grades,
    student_id_from_number,
)

MAIN_MENU = (
    "\n"
    "============ Main menu ============\n"
    "1. Add new course\n"
    "2. Add new class to a course\n"
    "3. Add student to a class\n"
    "4. Add grades\n"
    "5. Display information\n"
    "0. Exit\n"
)

GRADES_MENU = (
    "\n"
    "============ Grades menu ============\n"
    "1. Add grades for all the students in a class\n"
    "2. Add grades for a single student\n"
)

INFORMATION_MENU = (
    "\n"
    "============ Information menu ============\n"
    "1. List students and their grades in a class\n"
    "2. Show average grade for a student\n"
    "3. Show average grade for a class\n"
    "4. Show average grade for a course\n"
)

CHOICE_PROMPT = "Your choice: "
INVALID_CHOICE = "Please enter a valid number."
NO_STUDENTS = "There are no students in this class."

_CLASS_PROMPTS = {
    1: "Choose the class to which you want to add a student: ",
    2: "Choose the class to which you want to add grades: ",
    3: "Choose the class for which you want to view grades and students: ",
    4: "Choose the class for which you want to calculate the average grade: ",
}


def format_courses(files: DataFiles) -> str:
    """Return the numbered listing of all courses."""
    lines = ["", "============ Courses ============"]
    lines.extend(f"{course.id}. {course.name}" for course in iter_courses(files))
    return "\n".join(lines) + "\n"


def format_classes(files: DataFiles) -> str:
    """Return every course followed by the classes that belong to it."""
    classes = list(iter_classes(files))
    lines = ["", "============ Classes ============"]
    for course in iter_courses(files):
        lines.append(f"- {course.name}")
        lines.extend(
            f"  |- {school_class.id}. Class {school_class.name}"
            for school_class in classes
            if school_class.course_id == course.id
        )
    return "\n".join(lines) + "\n"


def format_students(files: DataFiles) -> str:
    """Return every course, its classes and the students enrolled in each."""
    classes = list(iter_classes(files))
    students = list(iter_students(files))
    lines = ["", "============ Students ============"]
    for course in iter_courses(files):
        lines.append(f"- {course.name}")
        for school_class in classes:
            if school_class.course_id != course.id:
                continue
            lines.append(f"  |- Class {school_class.name}")
            lines.extend(
                f"    |- {student.number} Student: ID = {student.student_id}, "
                f"Name = {student.name}"
                for student in students
                if student.class_id == school_class.id
            )
    return "\n".join(lines) + "\n"


class Console:
    """Menu-driven text interface reading from ``stdin`` and writing to ``stdout``."""

    def __init__(self, files: DataFiles, stdin: TextIO, stdout: TextIO) -> None:
        self.files = files
        self._in = stdin
        self._out = stdout

    # -- low-level input and output -------------------------------------

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _say(self, text: str = "") -> None:
        self._out.write(text + "\n")

    def _read_line(self) -> str:
        line = self._in.readline()
        if line == "":
            raise EOFError("no more input")
        return line.rstrip("\r\n")

    def _read_token(self) -> str:
        return self._read_line().strip()

    def _read_optional_int(self) -> Optional[int]:
        try:
            return int(self._read_token())
        except ValueError:
            return None

    def _read_int_in_range(self, low: int, high: int, retry: str) -> int:
        value = self._read_optional_int()
        while value is None or not low <= value <= high:
            self._write(retry)
            value = self._read_optional_int()
        return value

    def _read_valid(self, validate: Callable[[str], bool], retry: str, *, whole_line: bool = False) -> str:
        read = self._read_line if whole_line else self._read_token
        text = read()
        while not validate(text):
            self._write(retry)
            text = read()
        return text

    # -- choosing records -------------------------------------------------

    def _choose_course(self) -> int:
        self._write(format_courses(self.files))
        self._write("Choose the course to which you want to add a class: ")
        return self._read_int_in_range(
            1, count_lines(self.files.courses), "Please enter a valid course number: "
        )

    def _choose_class(self, mode: int = 1) -> int:
        self._write(format_classes(self.files))
        self._write(_CLASS_PROMPTS.get(mode, ""))
        return self._read_int_in_range(
            1, count_lines(self.files.classes), "Please enter a valid class Id: "
        )

    def _choose_student(self, showing_grades: bool = True) -> int:
        self._write(format_students(self.files))
        if showing_grades:
            self._write("Choose the student for which you want to view the average grade: ")
        else:
            self._write("Choose the student to which you want to add grades: ")
        return self._read_int_in_range(
            1, count_lines(self.files.students), "Please enter a valid student number: "
        )

    def _input_grade(self) -> int:
        return self._read_int_in_range(
            MIN_GRADE, MAX_GRADE, "Please enter a valid grade (0-30): "
        )

    def _input_class_name(self) -> str:
        self._write("Insert a letter for the class (A-Z): ")
        return self._read_valid(is_valid_class_name, "Please enter a valid letter (A-Z):\n")

    def _input_course_name(self) -> str:
        self._write("Insert a name for the course: ")
        return self._read_valid(
            is_valid_course_name,
            "Please enter a valid name (max. 50 char. and don't use commas): ",
            whole_line=True,
        )

    def _input_student_id(self) -> str:
        self._write("Insert the student ID: ")
        return self._read_valid(is_valid_student_id, "Please enter a valid ID:\n")

    def _input_student_name(self) -> str:
        self._write("Insert the student name (max. 20 characters): ")
        return self._read_valid(is_valid_student_name, "Please enter a valid name:\n")

    def _record_grade(self, course_id: int, class_id: int, student_number: int, student_id: str) -> None:
        self._write(f"Insert the grade for student {student_id}: ")
        value = self._input_grade()
        add_grade(self.files, course_id, class_id, student_number, value)
        self._say(f"Grade added successfully for student {student_id}.")

    # -- menu actions ----------------------------------------------------

    def add_new_course(self) -> None:
        """Ask for a course name and store the course."""
        name = self._input_course_name()
        while course_exists(self.files, name):
            self._write(f"Course {name} already exists. Please enter a new name: ")
            name = self._input_course_name()
        try:
            add_course(self.files, name)
        except OSError:
            self._say("Error writing to file. Please try again.")
            return
        self._say("Course added successfully.")

    def add_new_class(self) -> None:
        """Ask for a course and a letter and store the class."""
        course_id = self._choose_course()
        name = self._input_class_name()
        while class_exists(self.files, course_id, name):
            self._say(f"Class {name} already exists in this course.")
            name = self._input_class_name()
        add_class(self.files, course_id, name)
        self._say(f"Class {name} added successfully.")

    def add_new_student(self) -> None:
        """Ask for a class, an id and a name and enrol the student."""
        class_id = self._choose_class(1)
        student_id = self._input_student_id()
        while student_exists(self.files, class_id, student_id):
            self._say(f"Student {student_id} already exists in this class.")
            student_id = self._input_student_id()
        name = self._input_student_name()
        try:
            add_student(self.files, class_id, student_id, name)
        except OSError:
            self._say("Error writing to file. Please try again.")
            return
        self._say("Student added successfully.")

    def add_grades_to_student(self) -> None:
        """Record one grade for a chosen student."""
        student_number = self._choose_student(showing_grades=False)
        student_id = student_id_from_number(self.files, student_number) or ""
        class_id = class_id_from_student_number(self.files, student_number)
        if class_id is None:
            class_id = -1
        course_id = course_id_from_class_id(self.files, class_id)
        if course_id is None:
            course_id = -1
        self._record_grade(course_id, class_id, student_number, student_id)

    def add_grades_to_class(self) -> None:
        """Record one grade for every student of a chosen class."""
        class_id = self._choose_class(2)
        course_id = course_id_from_class_id(self.files, class_id)
        if course_id is None:
            course_id = -1
        if not class_has_students(self.files, class_id):
            self._say(NO_STUDENTS)
            return
        members = [s for s in iter_students(self.files) if s.class_id == class_id]
        for student in members:
            self._record_grade(course_id, class_id, student.number, student.student_id)

    def list_students_and_grades_in_class(self) -> None:
        """Show the grades of every graded student in a chosen class."""
        class_id = self._choose_class(3)
        if not class_has_students(self.files, class_id):
            self._say(NO_STUDENTS)
            return
        self._say()
        self._say("============ Students and Grades ============")
        for student in iter_students(self.files):
            if student.class_id != class_id:
                continue
            grades = grades_for_student(self.files, student.number)
            if not grades:
                continue
            self._say(f"Student ID: {student.student_id}")
            self._write("    |- Grades: ")
            self._say("".join(f"{grade.value} " for grade in grades))

    def show_average_for_student(self) -> None:
        """Show the mean grade of a chosen student."""
        student_number = self._choose_student()
        if not student_has_grades(self.files, student_number):
            self._say("This student has no grades.")
            return
        average = student_average(self.files, student_number)
        student_id = student_id_from_number(self.files, student_number) or ""
        self._say(f"Average grade for student {student_id}: {average:g}")

    def show_average_for_class(self) -> None:
        """Show the mean grade of a chosen class."""
        class_id = self._choose_class(4)
        if not class_has_students(self.files, class_id):
            self._say(NO_STUDENTS)
            return
        average = class_average(self.files, class_id)
        if average is None:
            self._say("There are no grades for this class.")
            return
        self._say(f"Average grade for class ID {class_id}: {average:g}")

    def show_average_for_course(self) -> None:
        """Show the mean grade of a chosen course."""
        course_id = self._choose_course()
        if not course_has_classes(self.files, course_id):
            self._say("There are no classes for this course.")
            return
        average = course_average(self.files, course_id)
        if average is None:
            self._say("There are no grades for this course.")
            return
        self._say(f"Average grade for course ID {course_id}: {average:g}")

    # -- menus -----------------------------------------------------------

    def _submenu(self, menu: str, actions: dict[int, Callable[[], None]]) -> None:
        self._write(menu)
        self._write(CHOICE_PROMPT)
        action = actions.get(self._read_optional_int())
        if action is None:
            self._say(INVALID_CHOICE)
        else:
            action()

    def run(self) -> None:
        """Show the main menu until the user chooses 0 or input runs out."""
        actions: dict[int, Callable[[], None]] = {
            1: self.add_new_course,
            2: self.add_new_class,
            3: self.add_new_student,
            4: lambda: self._submenu(
                GRADES_MENU,
                {1: self.add_grades_to_class, 2: self.add_grades_to_student},
            ),
            5: lambda: self._submenu(
                INFORMATION_MENU,
                {
                    1: self.list_students_and_grades_in_class,
                    2: self.show_average_for_student,
                    3: self.show_average_for_class,
                    4: self.show_average_for_course,
                },
            ),
        }
        try:
            while True:
                self._write(MAIN_MENU)
                self._write(CHOICE_PROMPT)
                choice = self._read_optional_int()
                if choice == 0:
                    return
                action = actions.get(choice)
                if action is None:
                    self._say(INVALID_CHOICE)
                else:
                    action()
        except EOFError:
            return


def main(argv: Optional[list[str]] = None) -> int:
    """Start the interactive console."""
    parser = argparse.ArgumentParser(description="University grade manager.")
    parser.add_argument(
        "--data-dir",
        default=None,
        help="directory holding the data files (default: ../data)",
    )
    args = parser.parse_args(argv)
    files = DataFiles() if args.data_dir is None else data_files_in(args.data_dir)
    Console(files, sys.stdin, sys.stdout).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())