"""Courses, classes, students and grades kept in plain text files, with a text menu."""

__version__ = "1.0.0"