[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ejercicios"
version = "0.1.0"
description = "Console exercises (signs, retirement age, areas, counting, temperatures, tasks) and small demonstrations of loops and conditionals."
requires-python = ">=3.10"
dependencies = []
keywords = ["exercises", "console", "education", "demonstrations"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Spanish",
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
ejercicios-demos = "ejercicios.demos:main"

[tool.hatch.build.targets.wheel]
packages = ["ejercicios"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
