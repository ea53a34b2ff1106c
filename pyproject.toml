[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mealdesk"
version = "0.1.0"
description = "A small terminal desk for reserving a daily meal at a dining hall"
requires-python = ">=3.10"
dependencies = []
keywords = ["cafeteria", "meal", "reservation", "dining hall", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mealdesk = "mealdesk.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mealdesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
