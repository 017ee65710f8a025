[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "sevendays"
version = "0.1.0"
description = "A terminal survival role-playing game: stay alive for seven days in the wilderness."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "terminal", "curses", "survival", "text-adventure", "story"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sevendays = "sevendays.app:main"

[tool.setuptools.packages.find]
include = ["sevendays*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
