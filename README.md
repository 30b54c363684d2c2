# gradebook

A small university grade manager. It keeps courses, the classes (sections)
of each course, the students enrolled in each class and the grades they
received, all in plain comma-separated text files.

## Installing

```
pip install .
```

## Using the command

```
gradebook
gradebook --data-dir data
```

Without `--data-dir` the data files are looked for in `../data`, relative
to the current directory. The command opens an interactive menu:

```
============ Main menu ============
1. Add new course
2. Add new class to a course
3. Add student to a class
4. Add grades
5. Display information
0. Exit
```

From there you can add courses, add lettered classes (A–Z) to a course,
enrol students in a class, record grades (0–30) for a single student or for
every student in a class, list the students of a class with their grades,
and show the average grade of a student, a class or a course. The menu
keeps asking until a valid answer is given; it ends on `0` or when input
runs out.

## Data files

The data lives in four files in one directory: `courses.txt`,
`classes.txt`, `students.txt` and `grades.txt`. Each line is one record,
with its fields separated by commas:

| File           | Fields                                             |
|----------------|----------------------------------------------------|
| `courses.txt`  | course id, course name                             |
| `classes.txt`  | class id, course id, class letter                  |
| `students.txt` | student number, class id, student id, student name |
| `grades.txt`   | course id, class id, student number, grade         |

Ids are assigned by counting the lines already in the file, so the first
record gets id 1. A missing file is treated as empty and is created on the
first write.

The student number is the program's own running number for an enrolment;
the student id is the university id. The same student id may be enrolled
in several classes, each time under a new student number.

Validation rules:

- course names are 3 to 50 characters and may not contain commas;
- class names are a single capital letter from A to Z, unique within a course;
- student ids are `S` or `s` followed by seven digits, for example `S1234567`,
  unique within a class;
- student names are letters and spaces only, at most 20 characters;
- grades are whole numbers from 0 to 30.

The `add_*` functions raise `ValueError` when a rule is broken.

## Using it as a library

```python
from gradebook.store import data_files_in
from gradebook.courses import add_course, list_course_names
from gradebook.classes import add_class
from gradebook.students import add_student
from gradebook.grades import add_grade, course_average, format_average

files = data_files_in("data")
add_course(files, "Mathematics")
add_class(files, 1, "A")
add_student(files, 1, "S1234567", "Ada Lovelace")
add_grade(files, 1, 1, 1, 28)

print(list_course_names(files))                   # ['Mathematics']
print(format_average(course_average(files, 1)))   # 28.00
```

The modules:

- `gradebook.store`: `DataFiles`, `data_files_in`, and the line-level helpers
  `read_rows`, `count_lines`, `append_row`, `delete_line`, `split_fields`.
- `gradebook.courses`: `Course`, `iter_courses`, `add_course`,
  `course_exists`, `course_name_from_id`, `course_has_classes`, and more.
- `gradebook.classes`: `SchoolClass`, `iter_classes`, `add_class`,
  `class_exists`, `course_id_from_class_id`, `class_name_from_id`,
  `class_has_students`.
- `gradebook.students`: `Student`, `iter_students`, `add_student`, lookups
  between student numbers and ids, `student_has_grades`,
  `count_student_grades`.
- `gradebook.grades`: `Grade`, `iter_grades`, `add_grade`,
  `grades_for_student`, `course_average`, `class_average`,
  `student_average` (each `None` when there are no grades) and
  `format_average`, which gives two decimals or `No grades.`.
- `gradebook.cli`: `Console`, which runs the menu over any pair of text
  streams, the listings `format_courses`, `format_classes`,
  `format_students`, and `main`.

## What it does not do

There is no graphical interface; the package works through the text menu
and the library functions only. Records cannot be edited or deleted from
the menu. `gradebook.store.delete_line` removes a line from a file, but
since ids follow line numbers, removing a line changes the ids of the lines
after it and the references to them are not updated.