[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gradebook"
version = "1.0.0"
description = "Keep courses, classes, students and their grades in plain text files"
requires-python = ">=3.10"
dependencies = []
keywords = ["grades", "university", "students", "courses", "gradebook"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gradebook = "gradebook.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gradebook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
