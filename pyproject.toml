[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pathignore"
version = "0.1.0"
description = "Decide whether a path should be ignored using gitignore rules, glob patterns or regular expressions."
requires-python = ">=3.10"
dependencies = []
keywords = ["gitignore", "glob", "regex", "ignore", "path", "matcher", "filter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pathignore"]

[tool.hatch.build.targets.sdist]
include = ["pathignore", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
